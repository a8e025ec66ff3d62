from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from genepool.config.settings import Settings, get_settings, reset_settings_cache


def teardown_module() -> None:  # pragma: no cover - test helper
    reset_settings_cache()


def test_defaults_are_anchored_at_project_root(tmp_path: Path) -> None:
    settings = Settings.from_env({"project_root": tmp_path}, environ={})

    assert settings.project_root == tmp_path.resolve()
    assert settings.configs_dir == tmp_path.resolve() / "configs"
    assert settings.logs_dir == tmp_path.resolve() / "logs"
    assert settings.random_seed == 42
    assert not settings.structured_logging


def test_environment_values_are_coerced(tmp_path: Path) -> None:
    environ = {
        "GENEPOOL_PROJECT_ROOT": str(tmp_path),
        "GENEPOOL_RANDOM_SEED": "123",
        "GENEPOOL_STRUCTURED_LOGGING": "yes",
        "GENEPOOL_LOGS_DIR": "run_logs",
        "UNRELATED": "ignored",
    }

    settings = Settings.from_env(environ=environ)

    assert settings.random_seed == 123
    assert settings.structured_logging
    assert settings.logs_dir == tmp_path.resolve() / "run_logs"


def test_overrides_beat_environment(tmp_path: Path) -> None:
    environ = {"GENEPOOL_STRUCTURED_LOGGING": "1", "GENEPOOL_CONFIGS_DIR": "env_configs"}

    settings = Settings.from_env(
        {"project_root": tmp_path, "configs_dir": tmp_path / "alt", "structured_logging": False},
        environ=environ,
    )

    assert settings.configs_dir == tmp_path / "alt"
    assert not settings.structured_logging


def test_rejects_unknown_override(tmp_path: Path) -> None:
    with pytest.raises(ValidationError, match="nope"):
        Settings.from_env({"project_root": tmp_path, "nope": 1}, environ={})


def test_rejects_bad_boolean(tmp_path: Path) -> None:
    with pytest.raises(ValidationError):
        Settings.from_env(
            {"project_root": tmp_path}, environ={"GENEPOOL_STRUCTURED_LOGGING": "maybe"}
        )


def test_settings_are_frozen(tmp_path: Path) -> None:
    settings = Settings.from_env({"project_root": tmp_path}, environ={})
    with pytest.raises(ValidationError):
        settings.random_seed = 1


def test_get_settings_caches_until_reset(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("GENEPOOL_PROJECT_ROOT", str(tmp_path))
    reset_settings_cache()

    first = get_settings()
    assert get_settings() is first
    assert first.project_root == tmp_path.resolve()

    reset_settings_cache()
    assert get_settings() is not first


def test_json_dump_is_serialisable(tmp_path: Path) -> None:
    payload = Settings.from_env({"project_root": tmp_path}, environ={}).model_dump(mode="json")
    assert payload["project_root"] == str(tmp_path.resolve())
    assert payload["random_seed"] == 42
    assert set(payload) == {
        "project_root",
        "configs_dir",
        "logs_dir",
        "random_seed",
        "structured_logging",
    }
