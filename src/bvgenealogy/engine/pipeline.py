"""End-to-end genealogy inference: load, relate, span, root."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Union

from bvgenealogy.config import InferenceConfig
from bvgenealogy.core.genotype import MutationModel
from bvgenealogy.core.population import Population, load_population, read_population
from bvgenealogy.core.profiling import timer
from bvgenealogy.graph.component import Component
from bvgenealogy.graph.relations import relation_table
from bvgenealogy.graph.rooting import root_tree
from bvgenealogy.graph.spanning import span_table

logger = logging.getLogger(__name__)


@dataclass
class GenealogyResult:
    parents: List[int]
    component: Component
    model: MutationModel
    records: list[dict] = field(default_factory=list)

    @property
    def scale(self) -> int:
        return self.model.scale

    @property
    def roots(self) -> List[int]:
        return [v for v, p in enumerate(self.parents) if p == -1]

    @property
    def mutual_pairs(self) -> List[tuple[int, int]]:
        """Vertex pairs recorded as each other's parent."""
        return [(v, p) for v, p in enumerate(self.parents) if p > v and self.parents[p] == v]

    def summary(self) -> dict:
        return {
            "scale": self.scale,
            "mutation_percent": self.model.mutation_percent,
            "expected_flips": self.model.expected_flips,
            "edges": len(self.component.edges),
            "redundant_edges": len(self.component.edges) - (len(self.component.vertices) - 1),
            "tree": self.component.is_tree(),
            "roots": len(self.roots),
            "mutual_pairs": len(self.mutual_pairs),
        }


def infer_from_population(population: Population, config: InferenceConfig, records: list | None = None) -> GenealogyResult:
    records = [] if records is None else records
    model = MutationModel(config.mutation_percent, len(population))
    logger.info(
        "inferring genealogy: scale=%d mutation=%d%% expected_flips=%d",
        model.scale,
        model.mutation_percent,
        model.expected_flips,
    )
    with timer("relate", records) as rec:
        table = relation_table(population, model, workers=config.workers)
        rec["count"] = len(table)
    with timer("span", records) as rec:
        component = span_table(table, len(population), acyclic=config.acyclic)
        rec["count"] = len(component.edges)
    with timer("root", records) as rec:
        parents = root_tree(component, len(population))
        rec["count"] = sum(1 for p in parents if p == -1)
    return GenealogyResult(parents=parents, component=component, model=model, records=records)


def infer_genealogy(source: Union[Path, str, Iterable[str]], config: InferenceConfig) -> GenealogyResult:
    """Run every stage on ``source``, a file path or an iterable of lines.

    Raises a :class:`~bvgenealogy.errors.GenealogyError` subclass naming the
    stage that failed.
    """
    records: list[dict] = []
    with timer("load", records) as rec:
        if isinstance(source, (str, Path)):
            population = read_population(Path(source), config.scale)
        else:
            population = load_population(source, config.scale)
        rec["count"] = len(population)
    return infer_from_population(population, config, records)


def format_parents(parents: Iterable[int]) -> str:
    return "".join(f"{p}\n" for p in parents)
