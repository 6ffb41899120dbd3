"""Greedy spanning-graph construction over weight-sorted relations.

Relations are visited in ascending ``nbd`` order. Each one either seeds a new
component, joins the component that already holds one of its endpoints, or
bridges two components, in which case the component created first absorbs
the other. Construction stops as soon as a component holds every vertex.

An edge whose endpoints already share a component is still attached unless
``acyclic`` is set, so the default result may contain cycles.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from bvgenealogy.core.genotype import MutationModel
from bvgenealogy.core.population import Population
from bvgenealogy.errors import SpanningError

from .component import Component
from .relations import PairRelation, RelationTable, relation_table

logger = logging.getLogger(__name__)


class SpanningGraphBuilder:
    def __init__(self, size: int, *, acyclic: bool = False):
        self.size = size
        self.acyclic = acyclic
        self.components: Dict[int, Component] = {}
        self._owner: Dict[int, Component] = {}
        self._next_serial = 0
        self.visited = 0
        self.skipped = 0

    def _seed(self, relation: PairRelation) -> Component:
        component = Component.seeded(relation, serial=self._next_serial)
        self._next_serial += 1
        self.components[component.serial] = component
        self._owner[relation.left] = component
        self._owner[relation.right] = component
        return component

    def _absorb(self, result: Component, other: Component) -> None:
        result.merge_with(other)
        for vertex in other.vertices:
            self._owner[vertex] = result
        del self.components[other.serial]

    def add(self, relation: PairRelation) -> Optional[Component]:
        """Place ``relation``; return the component once it spans every vertex."""
        self.visited += 1
        touching = {}
        for vertex in (relation.left, relation.right):
            owner = self._owner.get(vertex)
            if owner is not None:
                touching[owner.serial] = owner
        if not touching:
            component = self._seed(relation)
            return component if component.full(self.size) else None
        serials = sorted(touching)
        result = touching[serials[0]]
        if len(serials) > 1:
            self._absorb(result, touching[serials[1]])
        elif self.acyclic and result.contains(relation):
            self.skipped += 1
            return None
        result.add(relation)
        self._owner[relation.left] = result
        self._owner[relation.right] = result
        return result if result.full(self.size) else None

    def span(self, relations: Iterable[PairRelation]) -> Component:
        for relation in relations:
            result = self.add(relation)
            if result is not None:
                logger.info(
                    "spanning graph complete after %d relations: %d edges over %d vertices (%d skipped)",
                    self.visited,
                    len(result.edges),
                    len(result.vertices),
                    self.skipped,
                )
                return result
        logger.debug(
            "no component reached %d vertices; %d components remain after %d relations",
            self.size,
            len(self.components),
            self.visited,
        )
        raise SpanningError()


def _sorted_relations(table: RelationTable):
    for i in table.sorted_order():
        yield table.relation(int(i))


def span_relations(relations: Iterable[PairRelation], size: int, *, acyclic: bool = False) -> Component:
    """Grow a spanning component from relations already in preference order."""
    return SpanningGraphBuilder(size, acyclic=acyclic).span(relations)


def span_table(table: RelationTable, size: int, *, acyclic: bool = False) -> Component:
    return span_relations(_sorted_relations(table), size, acyclic=acyclic)


def build_spanning_graph(
    population: Population,
    model: MutationModel,
    *,
    workers: int = 1,
    acyclic: bool = False,
) -> Component:
    table = relation_table(population, model, workers=workers)
    return span_table(table, len(population), acyclic=acyclic)
