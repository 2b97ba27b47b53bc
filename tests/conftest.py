"""Shared pytest fixtures for fileignore tests."""
import os
from pathlib import Path
from typing import Callable, Iterable

import pytest
import yaml

from fileignore.infrastructure.config_manager import set_global_config
from fileignore.infrastructure.logger import set_global_logger


@pytest.fixture
def sample_lines() -> list:
    """Rule lines of a typical ignore file."""
    return [
        "# build output",
        "build/",
        "*.tmp",
        "",
        "!build/keep.txt",
        "   ",
        "node_modules",
    ]


@pytest.fixture
def write_ignore_file(tmp_path: Path) -> Callable[..., Path]:
    """Write lines into an ignore file under a fresh directory."""

    def _write(lines: Iterable[str], name: str = ".fileignore", directory: Path = None) -> Path:
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Create a configuration file."""
    config_path = tmp_path / "fileignore.yaml"
    with open(config_path, "w") as f:
        yaml.dump(
            {
                "fileignore": {
                    "ignore_file": {"name": ".customignore"},
                    "logging": {"level": "INFO"},
                }
            },
            f,
        )
    return config_path


@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch):
    """Reset global instances and FILEIGNORE_* variables between tests."""
    for key in list(os.environ):
        if key.startswith("FILEIGNORE_"):
            monkeypatch.delenv(key)
    set_global_logger(None)
    set_global_config(None)
    yield
    set_global_logger(None)
    set_global_config(None)
