"""
Breadth-first flattening of a tree into index-addressable NodeRecords.

Numbering is level order, left to right: root = 1, its children 2..k+1, and so on.
Each record points back to its parent's index, which always precedes it. These
numbers are the vertex ids of the graph handed to the layout engine.
"""

import operator
from typing import Any, Dict, List, Optional

from loguru import logger

from .shared.adapters import TreeAdapter, mark_visited
from .shared.errors import ContractViolation, EmptyTree, OutOfRange
from .shared.types import ROOT_PARENT, NodeRecord


def flatten(root: Any, adapter: TreeAdapter, *, mark_root_inner: bool = False) -> List[NodeRecord]:
    """
    Create the list of NodeRecords for the tree under root, in breadth-first order.

    The buffer is sized from adapter.size(root); a tree with more nodes than that
    raises OutOfRange, one with fewer raises ContractViolation.
    mark_root_inner=True records the root as an inner node even without children.
    """
    reported = adapter.size(root)
    if isinstance(reported, bool):
        raise ContractViolation("size() must return an integer, got bool")
    try:
        total = operator.index(reported)
    except TypeError:
        raise ContractViolation(f"size() must return an integer, got {type(reported).__name__}") from None
    if total == 0:
        raise EmptyTree("Tree has no nodes; at least a root is required")
    if total < 0:
        raise ContractViolation(f"size() returned a negative count: {total}")

    records: List[Optional[NodeRecord]] = [None] * total
    root_leaf = False if mark_root_inner else not adapter.has_children(root)
    records[0] = NodeRecord(1, ROOT_PARENT, root_leaf, adapter.label(root), 0)

    seen: Dict[int, Any] = {}
    mark_visited(seen, root)
    # Level-synchronous: frontier holds (node, index) of the level being expanded
    frontier = [(root, 1)]
    next_index = 2
    depth = 0
    while frontier:
        depth += 1
        next_frontier = []
        for node, node_index in frontier:
            for child in adapter.children(node):
                if next_index > total:
                    raise OutOfRange(
                        f"Tree has more nodes than size(root)={total}; is it cyclic or is size() wrong?"
                    )
                mark_visited(seen, child)
                records[next_index - 1] = NodeRecord(
                    next_index,
                    node_index,
                    not adapter.has_children(child),
                    adapter.label(child),
                    depth,
                )
                next_frontier.append((child, next_index))
                next_index += 1
        frontier = next_frontier

    written = next_index - 1
    if written != total:
        raise ContractViolation(f"size(root)={total} but traversal found {written} nodes")

    logger.debug("Flattened tree: {} nodes, {} levels", total, depth)
    return records


def levels(records: List[NodeRecord]) -> List[List[NodeRecord]]:
    """Group records by depth; each level keeps left-to-right order."""
    grouped: List[List[NodeRecord]] = []
    for rec in records:
        while len(grouped) <= rec.depth:
            grouped.append([])
        grouped[rec.depth].append(rec)
    return grouped
