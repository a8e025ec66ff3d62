"""Pydantic schemas for configuration validation.

All YAML files in ``configs/`` should validate against these schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

__all__ = ["EvolutionConfig"]


class EvolutionConfig(BaseModel):
    """Parameters of a gene pool and of the run driving it.

    Attributes
    ----------
    population_size : int
        Specimens per generation; must be even.
    mutation_probability : float
        Per-slot probability of redrawing an inherited value.
    cull_threshold : Optional[float]
        Minimum fitness (exclusive) to be picked as a parent. ``None``
        disables culling.
    elite_children : Optional[int]
        Fittest specimens copied unchanged into the next generation; must be
        even. ``None`` or ``0`` disables elitism.
    generations : int
        Evolution steps performed by a bounded run.
    seed : Optional[int]
        Seed for the engine's random generator.
    """

    population_size: int = Field(default=100, gt=0, description="Specimens per generation")
    mutation_probability: float = Field(
        default=0.01, description="Per-slot mutation probability"
    )
    cull_threshold: float | None = Field(
        default=None, description="Exclusive minimum fitness for parents"
    )
    elite_children: int | None = Field(
        default=None, ge=0, description="Specimens carried over unchanged"
    )
    generations: int = Field(default=100, ge=0, description="Evolution steps per run")
    seed: int | None = Field(default=None, description="Random generator seed")

    @field_validator("population_size")
    @classmethod
    def validate_population_even(cls, v: int) -> int:
        """Breeding produces children in pairs."""
        if v % 2 != 0:
            raise ValueError(f"population_size must be even, got {v}")
        return v

    @field_validator("elite_children")
    @classmethod
    def validate_elite_even(cls, v: int | None) -> int | None:
        if v is not None and v % 2 != 0:
            raise ValueError(f"elite_children must be even, got {v}")
        return v
