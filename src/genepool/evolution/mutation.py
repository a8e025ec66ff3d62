"""Per-slot mutation operators."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .phenotype import Shape, Specimen
from .population import random_value

__all__ = ["maybe_mutate", "mutate_specimen"]


def maybe_mutate(value, options: Sequence, probability: float, rng: np.random.Generator):
    """Redraw ``value`` from ``options`` with the given probability.

    The redraw is uniform over all options and may land on ``value`` again.
    Probabilities outside ``[0, 1]`` behave as never/always.
    """

    if rng.random() < probability:
        return random_value(options, rng)
    return value


def mutate_specimen(
    specimen: Sequence, shape: Shape, probability: float, rng: np.random.Generator
) -> Specimen:
    return tuple(
        maybe_mutate(value, options, probability, rng)
        for value, options in zip(specimen, shape)
    )
