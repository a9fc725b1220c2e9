"""Shared test fixtures for textops tests."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

SAMPLE_CSV = "name,age\nAlice,30\nBob,25\n"


@pytest.fixture
def runner() -> CliRunner:
    """Provide a CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV
