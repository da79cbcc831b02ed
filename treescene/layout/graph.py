"""Numbered directed graph from flattened records (parent -> child edges only)."""

from typing import List

import networkx as nx

from ..shared.errors import ContractViolation
from ..shared.types import ROOT_PARENT, NodeRecord


def build_graph(records: List[NodeRecord]) -> nx.DiGraph:
    """Vertices 1..n in index order; one edge parent_index -> index per non-root record."""
    G = nx.DiGraph()
    G.add_nodes_from(range(1, len(records) + 1))
    for pos, rec in enumerate(records, start=1):
        if rec.index != pos:
            raise ContractViolation(f"Record at position {pos} carries index {rec.index}")
        if pos == 1:
            if rec.parent_index != ROOT_PARENT:
                raise ContractViolation(f"Root record has parent {rec.parent_index}")
            continue
        if not 1 <= rec.parent_index < rec.index:
            raise ContractViolation(
                f"Record {rec.index} has parent {rec.parent_index}; parents must precede children"
            )
        G.add_edge(rec.parent_index, rec.index)
    return G
