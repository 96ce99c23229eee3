"""Pytest configuration and fixtures."""

import os

import pytest
from hypothesis import HealthCheck, settings
from typer.testing import CliRunner

from scriptpace.config import ScriptPaceSettings, reset_settings, set_settings

SAMPLE_SCREENPLAY = """\
INT. KITCHEN - MORNING

*Sunlight pours through the blinds.*

The kettle whistles on a cluttered stove.

JOHN
Morning. Did you sleep at all?

MARY (O.S.)
Not really.

JOHN
Coffee, then.

EXT. GARDEN - CONTINUOUS

MARY
I'll be outside.
"""

# The autouse settings fixture is function-scoped; property tests do not
# depend on its state between examples
settings.register_profile(
    "scriptpace",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("scriptpace")


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Give every test fresh settings that write reports into tmp_path."""
    # The CLI callback writes log flags straight into os.environ
    saved = {k: v for k, v in os.environ.items() if k.startswith("SCRIPTPACE_")}
    for key in saved:
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))

    reset_settings()
    set_settings(ScriptPaceSettings(report_output_dir=tmp_path))

    yield

    for key in [k for k in os.environ if k.startswith("SCRIPTPACE_")]:
        del os.environ[key]
    os.environ.update(saved)
    reset_settings()


@pytest.fixture
def sample_screenplay() -> str:
    """A short two-scene screenplay."""
    return SAMPLE_SCREENPLAY


@pytest.fixture
def screenplay_file(tmp_path, sample_screenplay):
    """The sample screenplay written to disk."""
    path = tmp_path / "kitchen.txt"
    path.write_text(sample_screenplay, encoding="utf-8")
    return path


@pytest.fixture
def cli_runner() -> CliRunner:
    """Typer CLI runner."""
    return CliRunner()
