"""Shared helpers: seeding, timing and logging shortcuts."""

from .logging_config import get_logger, log_dict
from .seed import MAX_SEED_VALUE, normalise_seed, rng_factory
from .timing import time_block

__all__ = [
    "get_logger",
    "log_dict",
    "MAX_SEED_VALUE",
    "normalise_seed",
    "rng_factory",
    "time_block",
]
