"""Parallel evaluation helpers."""
from __future__ import annotations
from multiprocessing import Pool
from typing import Callable, Iterable, Any


def parallel_map(fn: Callable[[Any], Any], items: Iterable[Any], workers: int):
    """Map ``fn`` over ``items``, preserving order, in ``workers`` processes."""
    if workers <= 1:
        return list(map(fn, items))
    with Pool(processes=workers) as pool:
        return pool.map(fn, items)


def chunk_ranges(total: int, chunks: int) -> list[range]:
    """Split ``range(total)`` into at most ``chunks`` contiguous ranges."""
    chunks = max(1, min(chunks, total))
    step, extra = divmod(total, chunks)
    out = []
    start = 0
    for i in range(chunks):
        stop = start + step + (1 if i < extra else 0)
        if stop > start:
            out.append(range(start, stop))
        start = stop
    return out
