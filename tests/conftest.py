"""
Pytest fixtures for apptotals tests
"""

import pytest
from pathlib import Path


@pytest.fixture
def fixtures_dir():
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def simple_log(fixtures_dir):
    """Three-line log with web and db records."""
    return fixtures_dir / "simple.jsonl"


@pytest.fixture
def second_log(fixtures_dir):
    """Log with a blank line, a null field and an extra key."""
    return fixtures_dir / "second.jsonl"


@pytest.fixture
def malformed_log(fixtures_dir):
    """Log whose second line is not JSON."""
    return fixtures_dir / "malformed.jsonl"
