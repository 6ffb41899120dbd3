"""Lightweight profiling helpers."""
import contextlib
import logging
import time
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def timer(name: str, records: Optional[list] = None) -> Iterator[dict]:
    """Time the enclosed block, log it and append a record to ``records``.

    The yielded dict may be filled with extra columns by the caller.
    """
    record = {"stage": name}
    start = time.perf_counter()
    yield record
    elapsed = time.perf_counter() - start
    record["seconds"] = elapsed
    logger.info("[PROFILE] %s: %.4fs", name, elapsed)
    if records is not None:
        records.append(record)
