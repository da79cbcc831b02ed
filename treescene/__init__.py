"""
treescene - draw any tree as boxes and connector lines.

Steps:
1. flatten     - breadth-first numbering of the tree (root = 1) into NodeRecords
2. build_graph - numbered networkx.DiGraph with parent -> child edges
3. layout      - one Point2 per node (networkx by default, pluggable)
4. build_scene - rects, connectors and label anchors, connectors first
"""

from .flatten import flatten, levels
from .layout import LayoutFn, build_graph, compute_layout, compute_tidy_layout
from .pipeline import visualize
from .scene import SceneStyle, build_scene, load_style, make_line, make_rect, make_style, scene_to_dict, scene_to_json
from .shared import (
    ROOT_PARENT,
    AttributeAdapter,
    ConnectorLine,
    ContractViolation,
    EmptyTree,
    InvalidParameter,
    NestedMappingAdapter,
    NodeRecord,
    OutOfRange,
    ParentMapAdapter,
    Point2,
    RectNode,
    Scene,
    TreeAdapter,
    TreeSceneError,
)

__all__ = [
    "AttributeAdapter",
    "ConnectorLine",
    "ContractViolation",
    "EmptyTree",
    "InvalidParameter",
    "LayoutFn",
    "NestedMappingAdapter",
    "NodeRecord",
    "OutOfRange",
    "ParentMapAdapter",
    "Point2",
    "ROOT_PARENT",
    "RectNode",
    "Scene",
    "SceneStyle",
    "TreeAdapter",
    "TreeSceneError",
    "build_graph",
    "build_scene",
    "compute_layout",
    "compute_tidy_layout",
    "flatten",
    "levels",
    "load_style",
    "make_line",
    "make_rect",
    "make_style",
    "scene_to_dict",
    "scene_to_json",
    "visualize",
]
