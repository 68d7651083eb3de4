"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

import importlib
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest


@pytest.fixture
def portable_repo_root(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Provide a temporary repository root for portable path detection."""

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import fylesystem.config.paths as paths

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    return tmp_path


@pytest.fixture
def config_runtime_env() -> Iterator[None]:
    """Reset configuration singletons around a test run."""

    import fylesystem.config.config as config_module

    original_instance = config_module.Config._instance  # pyright: ignore[reportPrivateUsage]
    original_config = config_module.config

    config_module.Config._instance = None  # pyright: ignore[reportPrivateUsage]

    try:
        yield None
    finally:
        config_module.Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        config_module.config = original_config


@pytest.fixture
def reload_settings() -> Iterator[Callable[..., object]]:
    """Reload ``settings`` against a temporary config, restoring it afterwards."""

    import fylesystem.config.config as config_module
    import fylesystem.config.settings as settings_module

    original_config = config_module.config

    def _reload(**overrides: object) -> object:
        config_module.config = config_module.Config(**overrides)  # pyright: ignore[reportArgumentType]
        return importlib.reload(settings_module)

    try:
        yield _reload
    finally:
        config_module.config = original_config
        _ = importlib.reload(settings_module)
