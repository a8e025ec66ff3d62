from __future__ import annotations

import pandas as pd
import pytest

from genepool.evolution import driver
from genepool.evolution.gene_pool import GenePool
from genepool.evolution.phenotype import InvalidEncodingError


def test_run_evolution_tracks_every_generation(one_max) -> None:
    pool = GenePool(one_max, 10, 0.1, elite_children=2, rng=21)

    run = driver.run_evolution(pool, 8)

    assert [summary.generation for summary in run.history] == list(range(9))
    assert len(run.population) == 10
    assert run.best_fitness == max(one_max.fitness(s) for s in run.population)
    assert run.best_specimen in run.population


def test_run_evolution_with_elites_is_monotonic(one_max) -> None:
    pool = GenePool(one_max, 12, 0.3, elite_children=2, rng=22)
    run = driver.run_evolution(pool, 15)
    best = [summary.best_fitness for summary in run.history]
    assert best == sorted(best)


def test_run_evolution_zero_generations_returns_seed(one_max) -> None:
    pool = GenePool(one_max, 4, 0.1, rng=23)
    seed = [(0, 0, 0, 0), (1, 1, 0, 0), (1, 1, 1, 0), (0, 0, 0, 1)]

    run = driver.run_evolution(pool, 0, seed=seed)

    assert run.population == seed
    assert run.best_specimen == (1, 1, 1, 0)
    assert run.best_fitness == 3.0


def test_run_evolution_without_history(one_max) -> None:
    pool = GenePool(one_max, 6, 0.1, rng=24)
    run = driver.run_evolution(pool, 3, track_history=False)
    assert run.history == []
    assert run.history_frame().empty


def test_run_evolution_rejects_negative_generations(one_max) -> None:
    pool = GenePool(one_max, 6, 0.1, rng=25)
    with pytest.raises(ValueError):
        driver.run_evolution(pool, -1)


def test_history_frame_is_indexed_by_generation(one_max) -> None:
    pool = GenePool(one_max, 6, 0.2, rng=26)
    frame = driver.run_evolution(pool, 4).history_frame()

    assert isinstance(frame, pd.DataFrame)
    assert list(frame.index) == [0, 1, 2, 3, 4]
    assert list(frame.columns) == ["best_fitness", "average_fitness", "diversity"]
    assert (frame["best_fitness"] >= frame["average_fitness"]).all()


def test_summarise_generation(one_max) -> None:
    population = [(1, 1, 1, 1), (0, 0, 0, 0), (0, 0, 0, 0), (1, 1, 0, 0)]
    summary = driver.summarise_generation(one_max, 3, population)
    assert summary.generation == 3
    assert summary.best_fitness == 4.0
    assert summary.average_fitness == pytest.approx(1.5)
    assert summary.diversity == pytest.approx(0.75)


def test_run_evolution_accepts_list_specimens_in_seed(one_max) -> None:
    pool = GenePool(one_max, 4, 0.1, rng=1)
    seed = [[0, 1, 0, 1], [1, 1, 1, 1], [0, 1, 0, 1], [0, 0, 0, 0]]

    run = driver.run_evolution(pool, 3, seed=seed)

    assert run.history[0].diversity == pytest.approx(0.75)
    assert len(run.history) == 4
    assert len(run.population) == 4


def test_run_evolution_with_unhashable_alleles() -> None:
    class Boxed:
        def shape(self):
            return (([0], [1]),) * 3

        def fitness(self, specimen) -> float:
            return float(sum(value[0] for value in specimen))

    pool = GenePool(Boxed(), 6, 0.2, elite_children=2, rng=2)

    run = driver.run_evolution(pool, 2)

    assert len(run.history) == 3
    assert all(0.0 < summary.diversity <= 1.0 for summary in run.history)
    assert run.best_fitness == max(Boxed().fitness(s) for s in run.population)


def test_summarise_generation_rejects_foreign_values(one_max) -> None:
    with pytest.raises(InvalidEncodingError):
        driver.summarise_generation(one_max, 0, [(0, 1, 2, 0)])
