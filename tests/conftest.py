"""Pytest configuration and fixtures."""

import os
from pathlib import Path

import pytest

from scriptfold.config import ScriptFoldSettings, configure_logging, reset_settings

# Import CLI fixtures to make them available globally
from tests.cli_fixtures import cli_invoke, cli_runner  # noqa: F401

SAMPLE_SCRIPT = """INT. HOUSE - DAY
John enters.

JOHN
hello.

MARY (V.O.)
hi.

EXT. GARDEN - NIGHT
Birds.
"""


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line(
        "markers", "slow: mark test as slow running (may need extended timeout)"
    )


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Give every test default settings and freshly configured logging."""
    for var in [k for k in os.environ if k.startswith("SCRIPTFOLD_")]:
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    configure_logging(ScriptFoldSettings())
    yield
    reset_settings()


@pytest.fixture
def sample_script() -> str:
    """A two-scene screenplay with two dialogue blocks."""
    return SAMPLE_SCRIPT


@pytest.fixture
def fountain_file(tmp_path: Path, sample_script: str) -> Path:
    """The sample screenplay written to a .fountain file."""
    path = tmp_path / "sample.fountain"
    path.write_text(sample_script, encoding="utf-8")
    return path
