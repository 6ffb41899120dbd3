import numpy as np
import pytest

from bvgenealogy.core.genotype import MutationModel
from bvgenealogy.core.population import load_population
from bvgenealogy.errors import ConvergenceError
from bvgenealogy.graph.component import Component
from bvgenealogy.graph.relations import PairRelation
from bvgenealogy.graph.rooting import discover_neighbors, prune_leaves, root_tree
from bvgenealogy.graph.spanning import build_spanning_graph


def _component(pairs):
    component = Component()
    for left, right in pairs:
        component.add(PairRelation(0, left, right))
    return component


def _undirected(parents):
    return {frozenset((v, p)) for v, p in enumerate(parents) if p != -1}


def test_discover_neighbors_inserts_both_directions():
    neighbors = discover_neighbors(_component([(0, 1), (1, 2)]).edges)
    assert neighbors == {0: {1}, 1: {0, 2}, 2: {1}}


def test_chain_ends_with_mutual_terminal_pair():
    assert root_tree(_component([(0, 1), (1, 2), (2, 3)]), 4) == [1, 2, 1, 2]


def test_odd_path_keeps_its_centre_as_root():
    assert root_tree(_component([(0, 1), (1, 2)]), 3) == [1, -1, 1]


def test_star_roots_at_its_centre():
    assert root_tree(_component([(0, 1), (0, 2), (0, 3), (0, 4)]), 5) == [-1, 0, 0, 0, 0]


def test_single_edge_is_a_terminal_pair():
    assert root_tree(_component([(0, 1)]), 2) == [1, 0]


def test_prune_leaves_uses_the_round_snapshot():
    neighbors = discover_neighbors(_component([(0, 1), (1, 2), (2, 3)]).edges)
    parents = [-1] * 4
    assert sorted(prune_leaves(neighbors, parents)) == [0, 3]
    assert parents == [1, -1, -1, 2]
    assert neighbors == {1: {2}, 2: {1}}


def test_cycle_does_not_converge():
    with pytest.raises(ConvergenceError):
        root_tree(_component([(0, 1), (1, 2), (2, 0)]), 3)


def test_cycle_with_pendant_vertices_does_not_converge():
    with pytest.raises(ConvergenceError):
        root_tree(_component([(3, 4), (0, 1), (0, 2), (1, 2), (1, 4)]), 5)


def test_redundant_spanning_edge_does_not_converge(triangle_lines):
    component = build_spanning_graph(load_population(triangle_lines), MutationModel(0, 5))
    with pytest.raises(ConvergenceError):
        root_tree(component, 5)


def test_acyclic_spanning_graph_converges(triangle_lines):
    component = build_spanning_graph(load_population(triangle_lines), MutationModel(0, 5), acyclic=True)
    assert root_tree(component, 5) == [1, -1, 0, 4, 1]


@pytest.mark.parametrize("seed", range(8))
def test_random_trees_reproduce_their_edges(seed):
    rng = np.random.default_rng(seed)
    size = int(rng.integers(2, 40))
    pairs = [(int(rng.integers(0, child)), child) for child in range(1, size)]
    parents = root_tree(_component(pairs), size)
    assert _undirected(parents) == {frozenset(p) for p in pairs}
    assert parents.count(-1) in (0, 1)
    assert all(p == -1 or 0 <= p < size for p in parents)
