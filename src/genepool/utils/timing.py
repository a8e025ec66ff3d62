"""Wall-clock timing of evolution runs."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Iterator

__all__ = ["time_block"]

_logger = logging.getLogger(__name__)


@contextmanager
def time_block(name: str, logger: logging.Logger | None = None) -> Iterator[None]:
    """Log how long the wrapped block took, even when it raises."""

    start = time.perf_counter()
    try:
        yield
    finally:
        (logger or _logger).info("%s took %.4fs", name, time.perf_counter() - start)
