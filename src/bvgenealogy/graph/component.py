"""Connected subgraph accumulated while building a spanning graph."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Set

from .relations import PairRelation


@dataclass(eq=False)
class Component:
    """Vertices and chosen edges of one growing subgraph.

    ``serial`` records creation order; among components touching the same
    relation the one created first absorbs the others.
    """

    vertices: Set[int] = field(default_factory=set)
    edges: List[PairRelation] = field(default_factory=list)
    serial: int = 0

    @classmethod
    def seeded(cls, relation: PairRelation, serial: int = 0) -> "Component":
        component = cls(serial=serial)
        component.add(relation)
        return component

    def add(self, relation: PairRelation) -> None:
        self.vertices.add(relation.left)
        self.vertices.add(relation.right)
        self.edges.append(relation)

    def connects_to(self, relation: PairRelation) -> bool:
        """True when ``relation`` shares a vertex with this component."""
        return relation.left in self.vertices or relation.right in self.vertices

    def contains(self, relation: PairRelation) -> bool:
        return relation.left in self.vertices and relation.right in self.vertices

    def merge_with(self, other: "Component") -> None:
        self.vertices.update(other.vertices)
        self.edges.extend(other.edges)

    def full(self, size: int) -> bool:
        return len(self.vertices) >= size

    def is_tree(self) -> bool:
        return len(self.edges) == len(self.vertices) - 1
