"""
Scene builder - turns records + coordinates into drawable primitives.

Connectors go from the parent's bottom center to the child's top center. Boxes
are centered on the node coordinate. All connectors are emitted before all
boxes, so drawing in order puts lines beneath boxes.
"""

from typing import List, Optional, Sequence, Tuple

from ..shared.errors import ContractViolation
from ..shared.types import ConnectorLine, DrawablePrimitive, NodeRecord, Point2, RectNode, Scene, record_at
from .style import SceneStyle, make_style


def make_rect(center: Point2, width: float, height: float) -> Tuple[Point2, ...]:
    """Corner points of a box around center: clockwise from top-left, closed."""
    left, right = center[0] - width / 2.0, center[0] + width / 2.0
    upper, lower = center[1] + height / 2.0, center[1] - height / 2.0
    return (
        Point2(left, upper),
        Point2(right, upper),
        Point2(right, lower),
        Point2(left, lower),
        Point2(left, upper),
    )


def make_line(parent: Point2, child: Point2, height: float) -> Tuple[Point2, Point2]:
    """Segment from parent's bottom center to child's top center (both boxes of height)."""
    return (
        Point2(parent[0], parent[1] - height / 2.0),
        Point2(child[0], child[1] + height / 2.0),
    )


def build_scene(
    records: Sequence[NodeRecord],
    coords: Sequence[Point2],
    box_width: Optional[float] = None,
    box_height: Optional[float] = None,
    style: Optional[SceneStyle] = None,
) -> Scene:
    """
    Build the scene for a flattened tree and its layout.

    box_width / box_height override the style's box size when given.
    Returns n - 1 connectors followed by n rects.
    """
    style = style or SceneStyle()
    overrides = {}
    if box_width is not None:
        overrides["box_width"] = box_width
    if box_height is not None:
        overrides["box_height"] = box_height
    if overrides:
        style = make_style(style.model_dump(), **overrides)
    else:
        style.check()

    if len(records) != len(coords):
        raise ContractViolation(f"{len(records)} records but {len(coords)} coordinates")

    width, height = style.box_width, style.box_height
    primitives: List[DrawablePrimitive] = []

    for rec in records[1:]:
        start, end = make_line(record_at(coords, rec.parent_index), record_at(coords, rec.index), height)
        primitives.append(ConnectorLine(rec.parent_index, rec.index, start, end, style.connector_color))

    for rec in records:
        center = Point2(*record_at(coords, rec.index))
        primitives.append(RectNode(
            index=rec.index,
            center=center,
            width=width,
            height=height,
            corners=make_rect(center, width, height),
            is_leaf=rec.is_leaf,
            opacity=style.leaf_opacity if rec.is_leaf else style.inner_opacity,
            fill_color=style.fill_color,
            label=rec.label,
            label_anchor=center,
            label_color=style.label_color,
            label_size=style.label_size,
        ))

    return Scene(tuple(primitives))
