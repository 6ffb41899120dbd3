"""Central RNG helpers using PCG64DXSM."""
from typing import Optional

import numpy as np
from numpy.random import Generator, PCG64DXSM


def make_rng(seed: Optional[int]) -> Generator:
    return Generator(PCG64DXSM(seed))


def random_bits(rng: Generator, count: int, probability: float) -> np.ndarray:
    """Boolean vector with each bit set independently at ``probability``."""
    return rng.random(count) < probability


def flip_bits(bits: np.ndarray, rng: Generator, probability: float) -> np.ndarray:
    """Copy of ``bits`` with every bit flipped independently at ``probability``."""
    return bits ^ random_bits(rng, bits.size, probability)
