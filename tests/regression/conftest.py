"""Regression test fixtures."""

import json
from pathlib import Path

import pytest


@pytest.fixture
def test_data_dir() -> Path:
    """Path to test data directory.

    Returns:
        Path to tests/data directory
    """
    return Path(__file__).parent.parent / "data"


@pytest.fixture
def load_baseline(test_data_dir: Path):
    """Load a known-good baseline by scenario name."""

    def _load(name: str) -> dict:
        return json.loads((test_data_dir / "expected" / f"{name}.json").read_text())

    return _load


@pytest.fixture
def tolerance() -> dict[str, float]:
    """Numerical tolerance for comparing outputs.

    Returns:
        Dictionary of tolerances for different value types
    """
    return {
        "carbon": 0.1,  # tonnes/year
        "index": 0.005,  # 2 decimal place indices
    }
