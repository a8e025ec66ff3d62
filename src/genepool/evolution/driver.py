"""Bounded runs over a gene pool's generation sequence."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Sequence

import numpy as np
import pandas as pd

from genepool.utils.logging_config import get_logger, log_dict
from genepool.utils.timing import time_block

from .gene_pool import GenePool
from .phenotype import InvalidEncodingError, Phenotype, Shape, Specimen, freeze_shape
from .ranking import find_best

__all__ = [
    "GenerationSummary",
    "EvolutionRun",
    "summarise_generation",
    "run_evolution",
]

logger = get_logger(__name__)


@dataclass(frozen=True)
class GenerationSummary:
    generation: int
    best_fitness: float
    average_fitness: float
    diversity: float


@dataclass(frozen=True)
class EvolutionRun:
    best_specimen: Specimen
    best_fitness: float
    population: list[Specimen]
    history: list[GenerationSummary]

    def history_frame(self) -> pd.DataFrame:
        columns = ["best_fitness", "average_fitness", "diversity"]
        if not self.history:
            return pd.DataFrame(columns=columns, index=pd.Index([], name="generation"))
        frame = pd.DataFrame(
            [
                {
                    "generation": summary.generation,
                    "best_fitness": summary.best_fitness,
                    "average_fitness": summary.average_fitness,
                    "diversity": summary.diversity,
                }
                for summary in self.history
            ]
        )
        return frame.set_index("generation")


def _allele_codes(shape: Shape, population: Sequence[Specimen]) -> np.ndarray:
    """Encode each specimen as the option index of every slot.

    Values are matched by equality, so unhashable alleles and list specimens
    are accepted.
    """

    codes = np.empty((len(population), len(shape)), dtype=np.int64)
    for row, specimen in enumerate(population):
        if len(specimen) != len(shape):
            raise InvalidEncodingError(
                f"specimen has {len(specimen)} slots, shape expects {len(shape)}"
            )
        for slot, (value, options) in enumerate(zip(specimen, shape)):
            try:
                codes[row, slot] = options.index(value)
            except ValueError as exc:
                raise InvalidEncodingError(
                    f"value {value!r} at slot {slot} is not admissible"
                ) from exc
    return codes


def summarise_generation(
    phenotype: Phenotype, index: int, population: Sequence[Specimen]
) -> GenerationSummary:
    """Fitness statistics of one population; diversity is the share of distinct specimens."""

    if not population:
        raise ValueError("population must not be empty")
    scores = np.array([phenotype.fitness(specimen) for specimen in population], dtype=float)
    codes = _allele_codes(freeze_shape(phenotype.shape()), population)
    distinct = np.unique(codes, axis=0).shape[0] if codes.shape[1] else 1
    return GenerationSummary(
        generation=index,
        best_fitness=float(scores.max()),
        average_fitness=float(scores.mean()),
        diversity=distinct / len(population),
    )


def run_evolution(
    pool: GenePool,
    generations: int,
    *,
    seed: Sequence[Specimen] | None = None,
    track_history: bool = True,
    log_every: int = 10,
) -> EvolutionRun:
    """Evolve ``generations`` steps and return the fittest specimen of the last population.

    The seed population (or a fresh random one) counts as generation ``0``, so
    ``generations + 1`` populations are pulled from :meth:`GenePool.generations`.
    """

    if generations < 0:
        raise ValueError("generations must be non-negative")

    phenotype = pool.phenotype
    history: list[GenerationSummary] = []
    population: list[Specimen] = []

    with time_block(f"evolution of {generations} generations", logger=logger):
        for index, population in enumerate(
            islice(pool.generations(seed), generations + 1)
        ):
            if not track_history:
                continue
            summary = summarise_generation(phenotype, index, population)
            history.append(summary)
            if log_every > 0 and (index % log_every == 0 or index == generations):
                log_dict(
                    logger,
                    "generation summary",
                    {
                        "generation": summary.generation,
                        "best_fitness": round(summary.best_fitness, 6),
                        "average_fitness": round(summary.average_fitness, 6),
                        "diversity": round(summary.diversity, 4),
                    },
                )

    best_specimen, best_fitness = find_best(phenotype, population)
    logger.info("Best fitness after %d generations: %s", generations, best_fitness)
    return EvolutionRun(
        best_specimen=best_specimen,
        best_fitness=best_fitness,
        population=population,
        history=history,
    )
