"""Single-point crossover for gene-pool specimens."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .phenotype import Specimen

__all__ = ["random_crossover_point", "single_point_crossover"]


def random_crossover_point(length: int, rng: np.random.Generator) -> int:
    """Uniform crossover index in ``[0, length)``."""

    if length <= 0:
        raise ValueError("specimens must have at least one slot")
    return int(rng.integers(length))


def single_point_crossover(
    parent_a: Sequence, parent_b: Sequence, point: int
) -> tuple[Specimen, Specimen]:
    """Split both parents at ``point`` and swap their tails.

    The first child inherits ``parent_a`` before ``point`` and ``parent_b``
    from ``point`` on; the second child is the complement. A point of ``0``
    therefore swaps the parents whole.
    """

    if len(parent_a) != len(parent_b):
        raise ValueError("parents must have equal length")
    child_a = tuple(parent_a[:point]) + tuple(parent_b[point:])
    child_b = tuple(parent_b[:point]) + tuple(parent_a[point:])
    return child_a, child_b
