"""Shared pytest fixtures for minicalc tests."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from minicalc.core.evaluator import EvalContext


@pytest.fixture
def context() -> EvalContext:
    """Return a fresh evaluation context."""
    return EvalContext()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a minicalc.toml with one constant and fixed precision."""
    path = tmp_path / "minicalc.toml"
    path.write_text(
        """
[constants]
E = 2.5

[output]
precision = 2
"""
    )
    return path
