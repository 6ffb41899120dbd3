"""Pairwise relations between every two genotypes of a population."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Iterable, List, Sequence

import numpy as np

from bvgenealogy.core.genotype import MutationModel
from bvgenealogy.core.population import Population
from bvgenealogy.engine.parallel import chunk_ranges, parallel_map

logger = logging.getLogger(__name__)

# Set-bit count of every byte value.
_POPCOUNT = np.unpackbits(np.arange(256, dtype=np.uint8)[:, None], axis=1).sum(axis=1).astype(np.int64)


@dataclass(frozen=True)
class PairRelation:
    """Candidate edge between genotypes ``left`` < ``right`` weighted by ``nbd``."""

    nbd: int
    left: int
    right: int

    def __post_init__(self):
        if self.left == self.right:
            raise ValueError(f"relation must join two distinct genotypes, got {self.left} twice")


@dataclass(frozen=True)
class RelationTable:
    """Column form of a relation list, aligned by position."""

    nbd: np.ndarray
    left: np.ndarray
    right: np.ndarray

    def __len__(self) -> int:
        return int(self.nbd.size)

    def relation(self, i: int) -> PairRelation:
        return PairRelation(int(self.nbd[i]), int(self.left[i]), int(self.right[i]))

    def to_relations(self) -> List[PairRelation]:
        return [PairRelation(int(d), int(l), int(r)) for d, l, r in zip(self.nbd, self.left, self.right)]

    def sorted_order(self) -> np.ndarray:
        """Positions sorted by ascending ``nbd``, ties kept in enumeration order."""
        return np.argsort(self.nbd, kind="stable")

    @classmethod
    def from_relations(cls, relations: Sequence[PairRelation]) -> "RelationTable":
        return cls(
            nbd=np.fromiter((r.nbd for r in relations), dtype=np.int64, count=len(relations)),
            left=np.fromiter((r.left for r in relations), dtype=np.int64, count=len(relations)),
            right=np.fromiter((r.right for r in relations), dtype=np.int64, count=len(relations)),
        )


def _row_block(packed: np.ndarray, model: MutationModel, rows: Iterable[int]):
    """Relations for every ``left`` in ``rows`` against all later genotypes."""
    nbd_parts, left_parts, right_parts = [], [], []
    size = packed.shape[0]
    for left in rows:
        if left + 1 >= size:
            continue
        hamming = _POPCOUNT[packed[left] ^ packed[left + 1 :]].sum(axis=1)
        nbd_parts.append(model.normalize(hamming))
        left_parts.append(np.full(size - left - 1, left, dtype=np.int64))
        right_parts.append(np.arange(left + 1, size, dtype=np.int64))
    if not nbd_parts:
        empty = np.empty(0, dtype=np.int64)
        return empty, empty, empty
    return np.concatenate(nbd_parts), np.concatenate(left_parts), np.concatenate(right_parts)


def relation_table(population: Population, model: MutationModel, workers: int = 1) -> RelationTable:
    """Compute all ``N*(N-1)/2`` relations in enumeration order.

    Rows are split into contiguous blocks; with ``workers > 1`` the blocks run in
    a process pool and are concatenated back in row order.
    """
    size = len(population)
    if size and size != model.scale:
        raise ValueError(f"population of {size} does not match model scale {model.scale}")
    packed = np.packbits(population.matrix(), axis=1) if size else np.empty((0, 0), dtype=np.uint8)
    blocks = chunk_ranges(size, workers * 4 if workers > 1 else 1)
    parts = parallel_map(partial(_row_block, packed, model), blocks, workers)
    if not parts:
        empty = np.empty(0, dtype=np.int64)
        return RelationTable(empty, empty, empty)
    table = RelationTable(
        nbd=np.concatenate([p[0] for p in parts]),
        left=np.concatenate([p[1] for p in parts]),
        right=np.concatenate([p[2] for p in parts]),
    )
    logger.info("enumerated %d relations over %d genotypes", len(table), size)
    return table


def enumerate_all_pairs(population: Population, model: MutationModel, workers: int = 1) -> List[PairRelation]:
    return relation_table(population, model, workers).to_relations()


def sort_relations(relations: Sequence[PairRelation]) -> List[PairRelation]:
    return sorted(relations, key=lambda r: r.nbd)
