"""Problem contract implemented by every search problem plugged into a gene pool."""

from __future__ import annotations

from typing import Any, Protocol, Sequence, TypeVar, runtime_checkable

__all__ = [
    "Phenotype",
    "InvalidEncodingError",
    "Shape",
    "Specimen",
    "freeze_shape",
    "validate_specimen",
]

T = TypeVar("T")

Shape = tuple[tuple[Any, ...], ...]
Specimen = tuple[Any, ...]


class InvalidEncodingError(ValueError):
    """Raised when a specimen does not fit the shape of its phenotype."""


@runtime_checkable
class Phenotype(Protocol[T]):
    """Search space and scoring function of one problem.

    ``shape()[i]`` lists every value that may appear in slot ``i`` of a
    specimen. The engine relies on ``shape()`` returning the same values on
    every call. ``fitness`` receives specimens of length ``len(shape())`` and
    must return a non-negative score, higher being better. It is evaluated
    again every time the engine needs it, so expensive problems should
    memoise on their side.
    """

    def shape(self) -> Sequence[Sequence[T]]:
        ...

    def fitness(self, specimen: Sequence[T]) -> float:
        ...


def freeze_shape(shape: Sequence[Sequence[T]]) -> Shape:
    """Return ``shape`` as nested tuples so it can be indexed cheaply and safely."""

    return tuple(tuple(options) for options in shape)


def validate_specimen(phenotype: Phenotype[T], specimen: Sequence[T]) -> None:
    """Check that ``specimen`` is a legal encoding for ``phenotype``.

    The gene pool never calls this while evolving; it exists for callers
    building seed populations by hand and for tests of phenotypes.
    """

    shape = phenotype.shape()
    if len(specimen) != len(shape):
        raise InvalidEncodingError(
            f"specimen has {len(specimen)} slots, shape expects {len(shape)}"
        )
    for index, (value, options) in enumerate(zip(specimen, shape)):
        if value not in options:
            raise InvalidEncodingError(
                f"value {value!r} at slot {index} is not admissible"
            )
