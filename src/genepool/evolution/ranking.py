"""Fitness ordering used to pick elites and the best specimen of a generation."""

from __future__ import annotations

import heapq
from functools import cmp_to_key
from typing import Sequence

from .phenotype import Phenotype, Specimen

__all__ = ["compare_fitness", "select_elite", "find_best"]


def compare_fitness(phenotype: Phenotype, first: Specimen, second: Specimen) -> int:
    """Rank two specimens by descending fitness.

    Returns ``-1`` when ``first`` is fitter, ``1`` when ``second`` is fitter
    and ``0`` on ties.
    """

    difference = phenotype.fitness(second) - phenotype.fitness(first)
    if difference < 0:
        return -1
    if difference > 0:
        return 1
    return 0


def select_elite(
    phenotype: Phenotype, population: Sequence[Specimen], count: int
) -> list[Specimen]:
    """Return the ``count`` fittest specimens of ``population``.

    A single pass keeps a bounded min-heap whose root is the weakest elite
    held so far; a specimen evicts the root only when it is strictly fitter.
    Ties are resolved by heap order.
    """

    if count <= 0:
        return []
    # Inverted comparator: the least fit specimen sorts first.
    key = cmp_to_key(lambda a, b: compare_fitness(phenotype, b, a))
    elite: list = []
    for specimen in population:
        if len(elite) < count:
            heapq.heappush(elite, key(specimen))
        elif phenotype.fitness(elite[0].obj) < phenotype.fitness(specimen):
            heapq.heapreplace(elite, key(specimen))
    return [entry.obj for entry in elite]


def find_best(
    phenotype: Phenotype, population: Sequence[Specimen]
) -> tuple[Specimen, float]:
    """Return the fittest specimen and its score; the first maximum seen wins."""

    if not population:
        raise ValueError("population must not be empty")
    best_specimen = population[0]
    best_score = phenotype.fitness(best_specimen)
    for specimen in population[1:]:
        score = phenotype.fitness(specimen)
        if score > best_score:
            best_specimen, best_score = specimen, score
    return best_specimen, float(best_score)
