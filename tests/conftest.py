"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from todotxt_cli.config import ConfigModel  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep the real TODO_DIR out of every test."""
    monkeypatch.delenv("TODO_DIR", raising=False)


@pytest.fixture
def config(tmp_path):
    """Configuration pointing at a temporary todo directory."""
    return ConfigModel(todo_dir=str(tmp_path))
