"""YAML configuration files validated against pydantic models."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Type, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

__all__ = ["ConfigError", "load_config"]

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class ConfigError(Exception):
    """Raised when a configuration file is missing, unreadable or invalid."""


def _locate(path: Path, search_dirs: Iterable[Path]) -> Path:
    candidates = [path]
    if not path.is_absolute():
        candidates.extend(Path(directory) / path for directory in search_dirs)
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    raise ConfigError(f"Configuration file not found: {path}")


def load_config(
    path: str | Path,
    schema: Type[T],
    *,
    search_dirs: Iterable[Path] = (),
) -> T:
    """Parse the YAML mapping at ``path`` into ``schema``.

    A relative ``path`` is tried against the working directory first, then
    under each of ``search_dirs`` in order.
    """

    resolved = _locate(Path(path), search_dirs)
    try:
        data = yaml.safe_load(resolved.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {resolved}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{resolved} must contain a YAML mapping")

    try:
        config = schema.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Configuration validation failed for {resolved}:\n{exc}") from exc
    logger.debug("Loaded %s from %s", schema.__name__, resolved)
    return config
