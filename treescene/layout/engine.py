"""
Layout engines.

compute_layout (default) delegates placement to networkx.bfs_layout, a level-order
layout. compute_tidy_layout delegates to igraph's Reingold-Tilford tidy tree.
This module only turns their output into an index-aligned point list and
normalizes the frame:
  - root on top, deeper levels below (y decreases with depth)
  - siblings left to right in numbering order
  - one unit between adjacent levels and between neighbours on a level
  - root at the origin
Any callable with the LayoutFn signature can replace either.
"""

from typing import Callable, List, Sequence

import networkx as nx
import numpy as np

from ..shared.errors import ContractViolation, EmptyTree
from ..shared.types import Point2

LayoutFn = Callable[[nx.DiGraph], Sequence[Point2]]

ROOT_INDEX = 1


def _normalize(arr: np.ndarray, graph: nx.DiGraph, root: int) -> List[Point2]:
    """Root on top at the origin, siblings left to right, unit level gap."""
    layers = list(nx.bfs_layers(graph, root))
    if len(layers) > 1:
        # root above its children
        first_child = layers[1][0]
        if arr[first_child - 1, 1] > arr[root - 1, 1]:
            arr[:, 1] *= -1
        gap = abs(arr[root - 1, 1] - arr[first_child - 1, 1])
        if gap > 0:
            arr /= gap
    for layer in layers:
        if len(layer) > 1:
            if arr[layer[1] - 1, 0] < arr[layer[0] - 1, 0]:
                arr[:, 0] *= -1
            break

    arr -= arr[root - 1]
    return [Point2(float(x), float(y)) for x, y in arr]


def compute_layout(graph: nx.DiGraph, root: int = ROOT_INDEX) -> List[Point2]:
    """Coordinates for vertices 1..n of a numbered tree; element i - 1 belongs to vertex i."""
    n = graph.number_of_nodes()
    if n == 0:
        raise EmptyTree("Cannot lay out an empty graph")

    pos = nx.bfs_layout(graph, root, align="horizontal")
    arr = np.array([pos[i] for i in range(1, n + 1)], dtype=float)
    return _normalize(arr, graph, root)


def compute_tidy_layout(graph: nx.DiGraph, root: int = ROOT_INDEX) -> List[Point2]:
    """
    Reingold-Tilford tidy tree from igraph: parents centered over their subtrees.

    Requires the "tidy" extra.
    """
    import igraph as ig

    n = graph.number_of_nodes()
    if n == 0:
        raise EmptyTree("Cannot lay out an empty graph")

    # igraph vertices are 0-based
    g = ig.Graph(n=n, edges=[(u - 1, v - 1) for u, v in graph.edges()], directed=True)
    layout = g.layout_reingold_tilford(mode="out", root=[root - 1])
    arr = np.array(layout.coords, dtype=float)
    return _normalize(arr, graph, root)


LAYOUTS = {
    "level": compute_layout,
    "tidy": compute_tidy_layout,
}


def check_layout(coords: Sequence, n: int) -> List[Point2]:
    """Coerce a layout result to Point2s and verify it has one point per node."""
    if len(coords) != n:
        raise ContractViolation(f"Layout returned {len(coords)} points for {n} nodes")
    return [Point2(float(c[0]), float(c[1])) for c in coords]
