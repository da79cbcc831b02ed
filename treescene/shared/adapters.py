"""
Tree adapters - the capability set (children, label, size) the pipeline reads.

The pipeline never looks at node types. Any tree becomes drawable by wrapping it
in a TreeAdapter subclass that answers children(node) and label(node).
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Dict, Hashable, Iterable, List, Mapping, Optional, Sequence, Tuple

from .errors import ContractViolation


def mark_visited(seen: Dict[int, Any], node: Any) -> None:
    """Record node by identity; a node met twice means the input is not a tree."""
    key = id(node)
    if key in seen:
        raise ContractViolation("node reachable twice; input is not a tree")
    # keep a reference so the id cannot be reused by a new object
    seen[key] = node


class TreeAdapter(ABC):
    """Capability interface for a rooted, ordered tree."""

    @abstractmethod
    def children(self, node: Any) -> Sequence[Any]:
        """Ordered children of node (empty for leaves)."""

    @abstractmethod
    def label(self, node: Any) -> str:
        """Display text for node, used verbatim."""

    def has_children(self, node: Any) -> bool:
        return len(self.children(node)) > 0

    def size(self, node: Any) -> int:
        """Number of nodes in the subtree rooted at node, node included."""
        seen: Dict[int, Any] = {}
        mark_visited(seen, node)
        queue = deque([node])
        while queue:
            current = queue.popleft()
            for child in self.children(current):
                mark_visited(seen, child)
                queue.append(child)
        return len(seen)


class NestedMappingAdapter(TreeAdapter):
    """Nested dicts: {"label": "...", "children": [{...}, ...]}."""

    def __init__(self, label_key: str = "label", children_key: str = "children"):
        self.label_key = label_key
        self.children_key = children_key

    @staticmethod
    def _check_node(node: Any) -> None:
        if not isinstance(node, Mapping):
            raise ContractViolation(f"tree node must be a mapping, got {type(node).__name__}")

    def children(self, node: Mapping) -> Sequence[Mapping]:
        self._check_node(node)
        kids = node.get(self.children_key) or []
        if not isinstance(kids, (list, tuple)):
            raise ContractViolation(f"'{self.children_key}' must be a list, got {type(kids).__name__}")
        return kids

    def label(self, node: Mapping) -> str:
        self._check_node(node)
        value = node.get(self.label_key)
        return "" if value is None else str(value)


class AttributeAdapter(TreeAdapter):
    """
    Plain objects with a children attribute.

    formatter(node) produces the label; without one the label_attr attribute is
    read (called if it is a method). Lets decision-tree style node classes be
    drawn with labels like "feat1 < 0.7" without touching their code.
    """

    def __init__(
        self,
        children_attr: str = "children",
        label_attr: str = "label",
        formatter: Optional[Callable[[Any], str]] = None,
    ):
        self.children_attr = children_attr
        self.label_attr = label_attr
        self.formatter = formatter

    def children(self, node: Any) -> Sequence[Any]:
        kids = getattr(node, self.children_attr, None)
        if callable(kids):
            kids = kids()
        return list(kids or [])

    def label(self, node: Any) -> str:
        if self.formatter is not None:
            return str(self.formatter(node))
        value = getattr(node, self.label_attr, None)
        if callable(value):
            value = value()
        return "" if value is None else str(value)


class ParentMapAdapter(TreeAdapter):
    """
    Tree from flat (node_id, parent_id, label) rows, e.g. a table with a parent column.

    The root is the single row whose parent_id is None. Children keep row order.
    Nodes handed to children()/label() are the node ids; use .root as the start.
    """

    def __init__(self, rows: Iterable[Tuple[Hashable, Optional[Hashable], str]]):
        self._labels: Dict[Hashable, str] = {}
        self._children: Dict[Hashable, List[Hashable]] = {}
        parents: Dict[Hashable, Optional[Hashable]] = {}
        for node_id, parent_id, label in rows:
            if node_id in self._labels:
                raise ContractViolation(f"Duplicate node id: {node_id!r}")
            self._labels[node_id] = str(label)
            parents[node_id] = parent_id
            self._children[node_id] = []

        roots = [nid for nid, pid in parents.items() if pid is None]
        if len(roots) != 1:
            raise ContractViolation(f"Expected exactly one root, found {len(roots)}")
        self.root = roots[0]

        for node_id, parent_id in parents.items():
            if parent_id is None:
                continue
            if parent_id not in self._children:
                raise ContractViolation(f"Node {node_id!r} references unknown parent {parent_id!r}")
            if parent_id == node_id:
                raise ContractViolation(f"Node {node_id!r} is its own parent")
            self._children[parent_id].append(node_id)

        # rows caught in a parent cycle are unreachable from the root
        reachable = self.size(self.root)
        if reachable != len(self._labels):
            raise ContractViolation(
                f"{len(self._labels) - reachable} node(s) not connected to root {self.root!r}"
            )

    def children(self, node: Hashable) -> Sequence[Hashable]:
        return self._children[node]

    def label(self, node: Hashable) -> str:
        return self._labels[node]
