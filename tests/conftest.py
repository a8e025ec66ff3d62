from __future__ import annotations

from typing import Sequence

import pytest


class OneMax:
    """Toy phenotype: ``length`` binary slots, fitness counts the ones."""

    def __init__(self, length: int = 4) -> None:
        self._shape = tuple((0, 1) for _ in range(length))

    def shape(self):
        return self._shape

    def fitness(self, specimen: Sequence[int]) -> float:
        return float(sum(specimen))


@pytest.fixture
def one_max() -> OneMax:
    return OneMax(4)
