import pytest
from typer.testing import CliRunner

# IOTA_MAX_DEPTH changes how deep the parser lets expressions nest. Clear it
# for every test so a value exported in the developer's shell cannot change
# results; tests that exercise it set it explicitly via monkeypatch.


@pytest.fixture(autouse=True)
def _clean_iota_env(monkeypatch):
    monkeypatch.delenv("IOTA_MAX_DEPTH", raising=False)


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()
