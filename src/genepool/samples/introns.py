"""Evolved introns: a sample problem for the gene pool.

The puzzle comes from the 2017 Stepik bioinformatics contest. Input looks
like this::

    TAGCGCGT
    3
    AC
    CGCG
    GT

The first line is a DNA sequence, the second the number of reads ``n`` and
the following ``n`` lines hold one read each. The goal is to keep a
subsequence of the DNA that contains as many reads as possible. The expected
output is the kept subsequence followed by the 1-based position of every
read inside it, ``-1`` when the read is missing::

    ACGT
    1
    -1
    3
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import IO, Sequence

from genepool.config.schemas import EvolutionConfig
from genepool.evolution.phenotype import Shape

__all__ = [
    "DEFAULT_CONFIG",
    "Expressed",
    "IntronsProblem",
    "IntronsPhenotype",
    "ProblemFormatError",
    "parse_problem",
    "read_positions",
    "format_solution",
]


DEFAULT_CONFIG = EvolutionConfig(
    population_size=200,
    mutation_probability=0.25,
    cull_threshold=40.0,
    elite_children=2,
    generations=200,
)


class ProblemFormatError(ValueError):
    """Raised when the puzzle input is malformed."""


class Expressed(Enum):
    NO = 0
    YES = 1

    def __repr__(self) -> str:
        return self.name


@dataclass(frozen=True)
class IntronsProblem:
    sequence: str
    reads: tuple[str, ...]


def parse_problem(stream: IO[str]) -> IntronsProblem:
    lines = [line.strip() for line in stream.read().splitlines()]
    if len(lines) < 2:
        raise ProblemFormatError("expected a sequence line and a read count")
    sequence, raw_count = lines[0], lines[1]
    if not sequence:
        raise ProblemFormatError("sequence must not be empty")
    try:
        count = int(raw_count)
    except ValueError as exc:
        raise ProblemFormatError(f"read count must be an integer, got {raw_count!r}") from exc
    if count < 0:
        raise ProblemFormatError(f"read count must be non-negative, got {count}")
    reads = lines[2 : 2 + count]
    if len(reads) < count:
        raise ProblemFormatError(f"expected {count} reads, got {len(reads)}")
    return IntronsProblem(sequence=sequence, reads=tuple(reads))


class IntronsPhenotype:
    """One slot per DNA character, each either expressed or spliced out."""

    def __init__(self, sequence: str, reads: Sequence[str]) -> None:
        self.sequence = sequence
        self.reads = tuple(reads)
        options = (Expressed.NO, Expressed.YES)
        self._shape: Shape = tuple(options for _ in sequence)

    @classmethod
    def from_problem(cls, problem: IntronsProblem) -> "IntronsPhenotype":
        return cls(problem.sequence, problem.reads)

    def shape(self) -> Shape:
        return self._shape

    def decode(self, specimen: Sequence[Expressed]) -> str:
        return "".join(
            char for char, state in zip(self.sequence, specimen) if state is Expressed.YES
        )

    def fitness(self, specimen: Sequence[Expressed]) -> float:
        """Percentage of reads found in the decoded subsequence."""
        if not self.reads:
            return 0.0
        decoded = self.decode(specimen)
        found = sum(1 for read in self.reads if read in decoded)
        return found / len(self.reads) * 100


def read_positions(decoded: str, reads: Sequence[str]) -> list[int]:
    return [decoded.find(read) + 1 if read in decoded else -1 for read in reads]


def format_solution(phenotype: IntronsPhenotype, specimen: Sequence[Expressed]) -> str:
    decoded = phenotype.decode(specimen)
    lines = [decoded, *(str(position) for position in read_positions(decoded, phenotype.reads))]
    return "\n".join(lines)
