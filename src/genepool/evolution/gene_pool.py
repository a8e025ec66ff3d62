"""Gene pool: the generation-to-generation transformation of a population."""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

import numpy as np

from genepool.config.schemas import EvolutionConfig
from genepool.utils.seed import rng_factory

from .crossover import random_crossover_point, single_point_crossover
from .mutation import mutate_specimen
from .phenotype import Phenotype, Specimen, freeze_shape
from .population import cull, random_population
from .ranking import select_elite

__all__ = ["ConfigurationError", "GenePool"]

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a gene pool is constructed with invalid parameters."""


class GenePool:
    """Evolves populations of specimens for one phenotype.

    Parameters
    ----------
    phenotype:
        Problem contract providing the shape and the fitness function.
    population_size:
        Specimens per generation. Must be even and positive.
    mutation_probability:
        Per-slot probability that an inherited value is redrawn. Not range
        checked: values <= 0 never mutate, values >= 1 always do.
    cull_threshold:
        When given, only specimens with fitness strictly above it may breed.
    elite_children:
        When given, that many of the fittest specimens are copied unchanged
        into the next generation. Must be even; ``0`` disables elitism.
    rng:
        Generator, seed or ``None``. The pool owns the resulting generator
        and uses it for every random draw.

    A pool is not safe for concurrent evolution steps from several threads.
    """

    def __init__(
        self,
        phenotype: Phenotype,
        population_size: int,
        mutation_probability: float,
        *,
        cull_threshold: float | None = None,
        elite_children: int | None = None,
        rng: np.random.Generator | int | None = None,
    ) -> None:
        if phenotype is None:
            raise ConfigurationError("phenotype is required")
        if population_size <= 0 or population_size % 2 != 0:
            raise ConfigurationError(
                f"Population size must be a positive even number, got {population_size}"
            )
        elite = 0 if elite_children is None else int(elite_children)
        if elite < 0 or elite % 2 != 0:
            raise ConfigurationError(
                f"Elite children must be a non-negative even number, got {elite_children}"
            )
        if elite > population_size:
            raise ConfigurationError(
                f"Elite children ({elite}) cannot exceed population size ({population_size})"
            )

        shape = freeze_shape(phenotype.shape())
        if not shape:
            raise ConfigurationError("Phenotype shape must have at least one slot")
        empty = [index for index, options in enumerate(shape) if not options]
        if empty:
            raise ConfigurationError(f"Shape slots without options: {empty}")

        self.phenotype = phenotype
        self.shape = shape
        self.population_size = int(population_size)
        self.mutation_probability = float(mutation_probability)
        self.cull_threshold = cull_threshold
        self.elite_children = elite
        self.rng = rng_factory(rng)

    @classmethod
    def from_config(
        cls,
        phenotype: Phenotype,
        config: EvolutionConfig,
        *,
        rng: np.random.Generator | int | None = None,
    ) -> "GenePool":
        return cls(
            phenotype,
            config.population_size,
            config.mutation_probability,
            cull_threshold=config.cull_threshold,
            elite_children=config.elite_children,
            rng=config.seed if rng is None else rng,
        )

    @property
    def culls(self) -> bool:
        return self.cull_threshold is not None

    def __repr__(self) -> str:
        return (
            f"GenePool(population_size={self.population_size}, "
            f"mutation_probability={self.mutation_probability}, "
            f"cull_threshold={self.cull_threshold}, "
            f"elite_children={self.elite_children})"
        )

    def initial_population(self) -> list[Specimen]:
        return random_population(self.shape, self.population_size, self.rng)

    def evolve(self, current: Sequence[Specimen]) -> list[Specimen]:
        """Derive the next generation from ``current`` without modifying it."""

        next_population: list[Specimen] = []
        if self.elite_children > 0:
            next_population.extend(
                select_elite(self.phenotype, current, self.elite_children)
            )

        if len(next_population) >= self.population_size:
            return next_population

        parents = self._select_parents(current)
        self._breed(parents, next_population)
        logger.debug(
            "Evolved generation: %d elites, %d parents, %d specimens",
            self.elite_children,
            len(parents),
            len(next_population),
        )
        return next_population

    def _select_parents(self, current: Sequence[Specimen]) -> Sequence[Specimen]:
        """Breeding candidates, or a fresh random population when none qualify."""

        if not self.culls:
            if current:
                return current
            logger.warning("Empty population; breeding from a fresh population")
            return self.initial_population()
        parents = cull(self.phenotype, current, self.cull_threshold)
        if not parents:
            logger.warning(
                "No specimen above cull threshold %s; breeding from a fresh population",
                self.cull_threshold,
            )
            return self.initial_population()
        return parents

    def generations(self, seed: Sequence[Specimen] | None = None) -> Iterator[list[Specimen]]:
        """Yield an unbounded, lazily computed sequence of populations.

        The first element is ``seed`` (or a fresh initial population); each
        following one is :meth:`evolve` applied to its predecessor. Stop
        consuming whenever you like.
        """

        population = list(seed) if seed is not None else self.initial_population()
        while True:
            yield population
            population = self.evolve(population)

    def mate(
        self,
        parent_a: Specimen,
        parent_b: Specimen,
        *,
        crossover_point: int | None = None,
    ) -> tuple[Specimen, Specimen]:
        """Cross two parents at one point and mutate both children slot by slot."""

        if crossover_point is None:
            crossover_point = random_crossover_point(len(self.shape), self.rng)
        child_a, child_b = single_point_crossover(parent_a, parent_b, crossover_point)
        return (
            mutate_specimen(child_a, self.shape, self.mutation_probability, self.rng),
            mutate_specimen(child_b, self.shape, self.mutation_probability, self.rng),
        )

    def _breed(self, parents: Sequence[Specimen], next_population: list[Specimen]) -> None:
        parent_count = len(parents)
        while len(next_population) < self.population_size:
            parent_a = parents[int(self.rng.integers(parent_count))]
            parent_b = parents[int(self.rng.integers(parent_count))]
            child_a, child_b = self.mate(parent_a, parent_b)
            next_population.append(child_a)
            # An odd remainder drops the second child.
            if len(next_population) < self.population_size:
                next_population.append(child_b)
