"""Public API of the gene-pool evolution engine."""

from .crossover import random_crossover_point, single_point_crossover
from .driver import EvolutionRun, GenerationSummary, run_evolution, summarise_generation
from .gene_pool import ConfigurationError, GenePool
from .mutation import maybe_mutate, mutate_specimen
from .phenotype import (
    InvalidEncodingError,
    Phenotype,
    Shape,
    Specimen,
    freeze_shape,
    validate_specimen,
)
from .population import cull, random_population, random_specimen
from .ranking import compare_fitness, find_best, select_elite

__all__ = [
    "ConfigurationError",
    "GenePool",
    "InvalidEncodingError",
    "Phenotype",
    "Shape",
    "Specimen",
    "freeze_shape",
    "validate_specimen",
    "compare_fitness",
    "select_elite",
    "find_best",
    "cull",
    "random_specimen",
    "random_population",
    "random_crossover_point",
    "single_point_crossover",
    "maybe_mutate",
    "mutate_specimen",
    "EvolutionRun",
    "GenerationSummary",
    "run_evolution",
    "summarise_generation",
]
