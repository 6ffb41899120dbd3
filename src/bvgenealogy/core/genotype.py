"""Bit-vector genotypes and the mutation-normalized dissimilarity."""
from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class MutationModel:
    """Per-bit mutation probability (as a percentage) for vectors of ``scale`` bits."""

    mutation_percent: int
    scale: int

    def __post_init__(self):
        if not 0 <= self.mutation_percent <= 100:
            raise ValueError("mutation_percent must be within [0, 100]")
        if self.scale <= 0:
            raise ValueError("scale must be positive")

    @property
    def expected_flips(self) -> int:
        return self.scale * self.mutation_percent // 100

    def normalize(self, hamming):
        """Absolute deviation of observed flips from the expected count.

        Works on a single count or on a numpy array of counts.
        """
        if isinstance(hamming, np.ndarray):
            return np.abs(hamming.astype(np.int64) - self.expected_flips)
        return abs(int(hamming) - self.expected_flips)


@dataclass(frozen=True, eq=False)
class Genotype:
    index: int
    bits: np.ndarray = field(repr=False)

    @classmethod
    def from_string(cls, index: int, text: str) -> "Genotype":
        bits = np.frombuffer(text.encode("ascii"), dtype=np.uint8) - ord("0")
        if bits.size and bits.max() > 1:
            raise ValueError(f"bit string holds characters other than 0/1: {text!r}")
        return cls(index=index, bits=bits.astype(bool))

    def __len__(self) -> int:
        return int(self.bits.size)

    def to_string(self) -> str:
        return "".join("1" if b else "0" for b in self.bits)

    def hamming(self, other: "Genotype") -> int:
        if self.bits.size != other.bits.size:
            raise ValueError(
                f"genotypes {self.index} and {other.index} differ in length "
                f"({self.bits.size} != {other.bits.size})"
            )
        return int(np.count_nonzero(self.bits ^ other.bits))


def dissimilarity(a: Genotype, b: Genotype, model: MutationModel) -> int:
    return model.normalize(a.hamming(b))
