"""Synthetic populations with a known genealogy.

A random genesis vector is mutated into ``scale - 1`` descendants, each a copy
of a uniformly chosen earlier member with every bit flipped independently at
the mutation probability. The population is then shuffled so the input order
carries no lineage information, and the true parent of each shuffled vector
is kept alongside.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

import numpy as np

from bvgenealogy.config import SimulationConfig
from bvgenealogy.core.rng import flip_bits, make_rng, random_bits

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class SimulatedPopulation:
    bits: np.ndarray
    parents: List[int]

    @property
    def scale(self) -> int:
        return int(self.bits.shape[0])

    def lines(self) -> List[str]:
        return ["".join("1" if b else "0" for b in row) for row in self.bits]


def simulate_population(config: SimulationConfig) -> SimulatedPopulation:
    rng = make_rng(config.seed)
    scale = config.scale
    probability = config.mutation_percent / 100
    population = np.empty((scale, scale), dtype=bool)
    population[0] = random_bits(rng, scale, config.genesis_bit_prob)
    child_to_parent = np.full(scale, -1, dtype=np.int64)
    for index in range(1, scale):
        parent = int(rng.integers(0, index))
        child_to_parent[index] = parent
        population[index] = flip_bits(population[parent], rng, probability)

    order = rng.permutation(scale)
    position = np.empty(scale, dtype=np.int64)
    position[order] = np.arange(scale)
    parents = [int(position[child_to_parent[i]]) if child_to_parent[i] >= 0 else -1 for i in order]
    logger.info("simulated %d genotypes at %d%% mutation (seed=%s)", scale, config.mutation_percent, config.seed)
    return SimulatedPopulation(bits=population[order], parents=parents)


def write_population(sim: SimulatedPopulation, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="\n") as handle:
        for line in sim.lines():
            handle.write(line + "\n")
    return path


def write_parents(parents: List[int], path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{p}\n" for p in parents))
    return path
