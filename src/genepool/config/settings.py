"""Process-wide settings read from ``GENEPOOL_*`` environment variables.

Explicit overrides beat the environment, which beats the field defaults.
Relative directories are anchored at ``project_root``.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, model_validator

__all__ = ["ENV_PREFIX", "Settings", "get_settings", "reset_settings_cache"]

ENV_PREFIX = "GENEPOOL_"


def _default_project_root() -> Path:
    return Path(__file__).resolve().parents[3]


class Settings(BaseModel):
    """Directories, default seed and log format shared by every command."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    project_root: Path
    configs_dir: Path
    logs_dir: Path
    random_seed: int = 42
    structured_logging: bool = False

    @model_validator(mode="before")
    @classmethod
    def _anchor_directories(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        values = dict(data)
        root = Path(values.get("project_root") or _default_project_root())
        root = root.expanduser().resolve()
        values["project_root"] = root
        for name in ("configs", "logs"):
            directory = Path(values.get(f"{name}_dir") or name).expanduser()
            values[f"{name}_dir"] = directory if directory.is_absolute() else root / directory
        return values

    @classmethod
    def from_env(
        cls,
        overrides: Mapping[str, Any] | None = None,
        *,
        environ: Mapping[str, str] | None = None,
    ) -> "Settings":
        """Build settings from ``environ`` (``os.environ`` by default) and ``overrides``.

        Values are coerced by pydantic, so ``GENEPOOL_STRUCTURED_LOGGING=yes``
        and ``GENEPOOL_RANDOM_SEED=7`` work. Unknown override names and
        uncoercible values raise :class:`pydantic.ValidationError`.
        """

        source = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for name in cls.model_fields:
            key = ENV_PREFIX + name.upper()
            if key in source:
                values[name] = source[key]
        values.update(overrides or {})
        return cls.model_validate(values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def reset_settings_cache() -> None:
    """Forget the cached settings so the environment is read again."""

    get_settings.cache_clear()
