"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def make_b_record(time="100000",
                  latitude="3453787N",
                  longitude="08526761W",
                  validity="A",
                  pressure_alt=100,
                  gnss_alt=None,
                  speed=0):
    """Build a B record line; GNSS altitude defaults to the pressure altitude."""
    if gnss_alt is None:
        gnss_alt = pressure_alt
    return f"B{time}{latitude}{longitude}{validity}{pressure_alt:05d}{gnss_alt:05d}{speed:03d}"


@pytest.fixture(autouse=True)
def reset_settings():
    """Restore the settings singleton after every test."""
    from igc_flightlog.config.settings import settings

    config_file = settings._config_file
    yield settings
    settings.reset_to_defaults()
    settings._config_file = config_file


@pytest.fixture(scope="session")
def project_root_dir():
    """Provide the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def b_record():
    """Provide the B record builder."""
    return make_b_record


@pytest.fixture
def sample_lines():
    """
    Provide a short flight: launch at 10:00:00, climb, two stationary fixes.

    t=0s speed 5 at 100 m, t=5s speed 5 at 150 m, t=10s speed 0 at 140 m,
    t=15s speed 0 at 120 m.
    """
    return [
        "AXXX001 test logger",
        "HFDTE170818",
        "I013638TAS",
        make_b_record("100000", pressure_alt=100, speed=5),
        make_b_record("100005", pressure_alt=150, speed=5),
        make_b_record("100010", pressure_alt=140, speed=0),
        make_b_record("100015", pressure_alt=120, speed=0),
        "GABCDEF0123456789",
    ]


@pytest.fixture
def sample_igc_file(tmp_path, sample_lines):
    """Write the sample flight to an IGC file."""
    path = tmp_path / "sample.igc"
    path.write_text("\r\n".join(sample_lines) + "\r\n")
    return path


@pytest.fixture
def malformed_igc_file(tmp_path, sample_lines):
    """Write an IGC file with one truncated B record."""
    lines = list(sample_lines)
    lines.insert(4, "B100002345378")
    path = tmp_path / "broken.igc"
    path.write_text("\n".join(lines) + "\n")
    return path
