"""Shared types, errors and tree adapters."""

from .adapters import AttributeAdapter, NestedMappingAdapter, ParentMapAdapter, TreeAdapter
from .errors import ContractViolation, EmptyTree, InvalidParameter, OutOfRange, TreeSceneError
from .types import ROOT_PARENT, ConnectorLine, DrawablePrimitive, NodeRecord, Point2, RectNode, Scene, record_at

__all__ = [
    "AttributeAdapter",
    "ConnectorLine",
    "ContractViolation",
    "DrawablePrimitive",
    "EmptyTree",
    "InvalidParameter",
    "NestedMappingAdapter",
    "NodeRecord",
    "OutOfRange",
    "ParentMapAdapter",
    "Point2",
    "ROOT_PARENT",
    "RectNode",
    "Scene",
    "TreeAdapter",
    "TreeSceneError",
    "record_at",
]
