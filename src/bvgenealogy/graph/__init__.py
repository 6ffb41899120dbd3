"""Relations, spanning-graph construction and tree rooting."""
from .relations import PairRelation, RelationTable, enumerate_all_pairs, relation_table, sort_relations
from .component import Component
from .spanning import SpanningGraphBuilder, build_spanning_graph, span_relations, span_table
from .rooting import discover_neighbors, prune_leaves, root_neighbors, root_tree

__all__ = [
    "PairRelation",
    "RelationTable",
    "enumerate_all_pairs",
    "relation_table",
    "sort_relations",
    "Component",
    "SpanningGraphBuilder",
    "build_spanning_graph",
    "span_relations",
    "span_table",
    "discover_neighbors",
    "prune_leaves",
    "root_neighbors",
    "root_tree",
]
