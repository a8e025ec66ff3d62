"""Deterministic random generator helpers.

Every engine owns exactly one :class:`numpy.random.Generator`; these helpers
build it from whatever the caller has at hand (``None``, an ``int`` seed or an
existing generator) so reruns with the same seed reproduce the same
populations.
"""

from __future__ import annotations

import logging

import numpy as np

__all__ = ["MAX_SEED_VALUE", "normalise_seed", "rng_factory"]

logger = logging.getLogger(__name__)

MAX_SEED_VALUE = 2**32


def normalise_seed(seed: int) -> int:
    """Fold ``seed`` into ``[0, 2**32 - 1]``."""

    return abs(int(seed)) % MAX_SEED_VALUE


def rng_factory(seed: int | np.random.Generator | None = None) -> np.random.Generator:
    """Return a generator for ``seed``.

    Generators are passed through untouched, integers are normalised and fed
    to :func:`numpy.random.default_rng`, ``None`` yields fresh OS entropy.
    """

    if isinstance(seed, np.random.Generator):
        return seed
    if seed is None:
        return np.random.default_rng()
    normalised = normalise_seed(seed)
    logger.debug("Seeding generator with %s", normalised)
    return np.random.default_rng(normalised)
