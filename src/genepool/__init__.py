"""
genepool: genetic-algorithm search over discrete encodings.

A problem plugs in by implementing :class:`~genepool.evolution.Phenotype`
(a shape and a fitness function); :class:`~genepool.evolution.GenePool`
evolves populations for it, lazily and one generation at a time.
"""

__version__ = "0.1.0"

from .evolution import (
    ConfigurationError,
    GenePool,
    InvalidEncodingError,
    Phenotype,
    run_evolution,
)

__all__ = [
    "__version__",
    "ConfigurationError",
    "GenePool",
    "InvalidEncodingError",
    "Phenotype",
    "run_evolution",
]
