"""Orient a spanning graph into a parent array by repeated leaf pruning."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Set

from bvgenealogy.errors import ConvergenceError

from .component import Component
from .relations import PairRelation

logger = logging.getLogger(__name__)

Neighbors = Dict[int, Set[int]]


def discover_neighbors(edges: Iterable[PairRelation]) -> Neighbors:
    """Map each vertex to the set of vertices sharing an edge with it."""
    neighbors: Neighbors = {}
    for edge in edges:
        neighbors.setdefault(edge.left, set()).add(edge.right)
        neighbors.setdefault(edge.right, set()).add(edge.left)
    return neighbors


def prune_leaves(neighbors: Neighbors, parents: List[int]) -> List[int]:
    """Strip one round of leaves from ``neighbors``, recording their parents.

    Leaves are collected from the map as it stands on entry, so two leaves
    adjacent to each other both record the other as parent. Returns the
    leaves removed.
    """
    leaves = [(vertex, next(iter(adjacent))) for vertex, adjacent in neighbors.items() if len(adjacent) == 1]
    for child, parent in leaves:
        parents[child] = parent
        neighbors[parent].discard(child)
    for child, _ in leaves:
        del neighbors[child]
    return [child for child, _ in leaves]


def root_neighbors(neighbors: Neighbors, size: int) -> List[int]:
    """Prune ``neighbors`` in place until at most one vertex is left."""
    parents = [-1] * size
    rounds = 0
    while len(neighbors) > 1:
        leaves = prune_leaves(neighbors, parents)
        rounds += 1
        if not leaves:
            logger.debug("no leaves among %d remaining vertices after %d rounds", len(neighbors), rounds)
            raise ConvergenceError()
        logger.debug("round %d pruned %d leaves, %d vertices remain", rounds, len(leaves), len(neighbors))
    logger.info("genealogy converged after %d pruning rounds", rounds)
    return parents


def root_tree(component: Component, size: int) -> List[int]:
    return root_neighbors(discover_neighbors(component.edges), size)
