"""Layout module - numbered graph from records, coordinates from the graph."""

from .engine import LAYOUTS, LayoutFn, check_layout, compute_layout, compute_tidy_layout
from .graph import build_graph

__all__ = ["LAYOUTS", "LayoutFn", "build_graph", "check_layout", "compute_layout", "compute_tidy_layout"]
