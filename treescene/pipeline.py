"""
End-to-end pipeline: tree -> records -> numbered graph -> coordinates -> scene.

Each stage consumes the complete output of the previous one. Nothing is cached
between calls, so separate trees can be processed concurrently.
"""

from typing import Any, Optional

from loguru import logger

from .flatten import flatten
from .layout import LayoutFn, build_graph, check_layout, compute_layout
from .scene import SceneStyle, build_scene
from .shared.adapters import TreeAdapter
from .shared.types import Scene


def visualize(
    root: Any,
    adapter: TreeAdapter,
    style: Optional[SceneStyle] = None,
    layout_fn: LayoutFn = compute_layout,
    mark_root_inner: bool = False,
) -> Scene:
    """Build the scene for the tree under root. Style is checked before the tree is read."""
    style = (style or SceneStyle()).check()

    records = flatten(root, adapter, mark_root_inner=mark_root_inner)
    graph = build_graph(records)
    coords = check_layout(layout_fn(graph), len(records))
    scene = build_scene(records, coords, style=style)

    logger.debug(
        "Scene built: {} nodes, {} connectors",
        len(records),
        graph.number_of_edges(),
    )
    return scene
