"""Utilities for creating and filtering gene-pool populations."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .phenotype import Phenotype, Shape, Specimen

__all__ = [
    "random_value",
    "random_specimen",
    "random_population",
    "cull",
]


def random_value(options: Sequence, rng: np.random.Generator):
    return options[int(rng.integers(len(options)))]


def random_specimen(shape: Shape, rng: np.random.Generator) -> Specimen:
    return tuple(random_value(options, rng) for options in shape)


def random_population(shape: Shape, size: int, rng: np.random.Generator) -> list[Specimen]:
    if size <= 0:
        raise ValueError("population size must be positive")
    return [random_specimen(shape, rng) for _ in range(size)]


def cull(
    phenotype: Phenotype, population: Sequence[Specimen], threshold: float
) -> list[Specimen]:
    """Keep the specimens whose fitness is strictly above ``threshold``."""

    return [specimen for specimen in population if phenotype.fitness(specimen) > threshold]
