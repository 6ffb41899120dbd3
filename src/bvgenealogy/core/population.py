"""Population loading and validation."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional

import numpy as np

from bvgenealogy.core.genotype import Genotype
from bvgenealogy.errors import PopulationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Population:
    """Exactly ``scale`` genotypes of ``scale`` bits, in input order."""

    genotypes: tuple[Genotype, ...]

    @property
    def scale(self) -> int:
        return len(self.genotypes)

    def __len__(self) -> int:
        return len(self.genotypes)

    def __iter__(self) -> Iterator[Genotype]:
        return iter(self.genotypes)

    def __getitem__(self, index: int) -> Genotype:
        return self.genotypes[index]

    def matrix(self) -> np.ndarray:
        """Stack the genotypes into a (scale, scale) boolean matrix."""
        return np.stack([g.bits for g in self.genotypes])


def _strip_newline(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def load_population(source: Iterable[str], scale: Optional[int] = None) -> Population:
    """Read ``scale`` bit-string lines from ``source``.

    ``scale`` defaults to the length of the first line. Raises
    :class:`PopulationError` with the number of lines consumed before the first
    missing or malformed line and that line's raw text. Lines past the
    ``scale``-th are never read.
    """
    lines = iter(source)
    genotypes: list[Genotype] = []
    n = 0
    while scale is None or n < scale:
        raw = next(lines, None)
        if raw is None:
            raise PopulationError(n, "")
        text = _strip_newline(raw)
        if scale is None:
            if not text:
                raise PopulationError(n, text)
            scale = len(text)
            logger.debug("population scale inferred from first line: %d", scale)
        if len(text) != scale:
            raise PopulationError(n, text)
        try:
            genotypes.append(Genotype.from_string(n, text))
        except ValueError as exc:
            raise PopulationError(n, text) from exc
        n += 1
    if scale == 0:
        raise PopulationError(0, "")
    logger.info("loaded population of %d genotypes", len(genotypes))
    return Population(genotypes=tuple(genotypes))


def read_population(path: Path, scale: Optional[int] = None) -> Population:
    try:
        with open(path, "r", encoding="latin-1", newline="") as handle:
            return load_population(handle, scale)
    except OSError as exc:
        logger.debug("cannot read population file %s: %s", path, exc)
        raise PopulationError(0, "") from exc
