"""Shared fixtures for roster parser tests."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_roster_path() -> Path:
    return FIXTURES_DIR / "saturday_roster.txt"


@pytest.fixture
def sample_roster(sample_roster_path: Path) -> str:
    return sample_roster_path.read_text(encoding="utf-8")
