"""
Data types shared by the pipeline stages.

Records and points are index-aligned: node index i (1-based, root = 1) lives at
list position i - 1.
"""

from typing import List, NamedTuple, Sequence, Tuple, Union

from .errors import ContractViolation

# parent_index of the root record
ROOT_PARENT = 0


class NodeRecord(NamedTuple):
    index: int
    parent_index: int
    is_leaf: bool
    label: str
    depth: int = 0

    @property
    def is_root(self) -> bool:
        return self.parent_index == ROOT_PARENT


class Point2(NamedTuple):
    x: float
    y: float


class RectNode(NamedTuple):
    """Box for one node. corners: clockwise from top-left, closed (5 points)."""
    index: int
    center: Point2
    width: float
    height: float
    corners: Tuple[Point2, ...]
    is_leaf: bool
    opacity: float
    fill_color: str
    label: str
    label_anchor: Point2
    label_color: str
    label_size: float


class ConnectorLine(NamedTuple):
    """Segment from the parent's bottom center to the child's top center."""
    parent_index: int
    child_index: int
    start: Point2
    end: Point2
    color: str


DrawablePrimitive = Union[ConnectorLine, RectNode]


class Scene(NamedTuple):
    """Ordered primitives: all connectors first, then all rects (z-order)."""
    primitives: Tuple[DrawablePrimitive, ...]

    @property
    def connectors(self) -> List[ConnectorLine]:
        return [p for p in self.primitives if isinstance(p, ConnectorLine)]

    @property
    def rects(self) -> List[RectNode]:
        return [p for p in self.primitives if isinstance(p, RectNode)]

    def bounds(self) -> Tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y) over all rect corners."""
        rects = self.rects
        if not rects:
            return (0.0, 0.0, 0.0, 0.0)
        xs = [c.x for r in rects for c in r.corners]
        ys = [c.y for r in rects for c in r.corners]
        return (min(xs), min(ys), max(xs), max(ys))


def record_at(records: Sequence, index: int):
    """Look up the item for 1-based node index (works for records and coords)."""
    if not isinstance(index, int) or index < 1 or index > len(records):
        raise ContractViolation(f"Node index {index} outside 1..{len(records)}")
    return records[index - 1]
