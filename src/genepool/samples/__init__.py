"""Sample problems solved with the gene pool."""

from .introns import (
    DEFAULT_CONFIG,
    Expressed,
    IntronsPhenotype,
    IntronsProblem,
    ProblemFormatError,
    format_solution,
    parse_problem,
    read_positions,
)

__all__ = [
    "DEFAULT_CONFIG",
    "Expressed",
    "IntronsPhenotype",
    "IntronsProblem",
    "ProblemFormatError",
    "format_solution",
    "parse_problem",
    "read_positions",
]
