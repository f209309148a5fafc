"""Pytest configuration and fixtures for all tests."""

import logging
from pathlib import Path

import pytest

from aerolens.airports.database import AirportDirectory
from aerolens.aviation.airlines import AirlineDirectory
from aerolens.core.registry import ReferenceRegistry, get_default_registry

SAMPLE_AIRPORTS_CSV = """icao,iata,name,city,country,lat,lon
KJFK,JFK,"John F. Kennedy International","New York",US,40.6413,-73.7781
KLAX,LAX,"Los Angeles International","Los Angeles",US,33.9425,-118.4081
EGLL,LHR,"London Heathrow","London",GB,51.47,-0.4543
LFPG,CDG,"Paris Charles de Gaulle","Paris",FR,49.0097,2.5479
"""

SAMPLE_AIRLINES_YAML = """
airlines:
  - {icao: UAL, iata: UA, name: United Airlines, country: US}
  - {icao: BAW, iata: BA, name: British Airways, country: GB}
  - {icao: UPS, iata: "5X", name: UPS Airlines, country: US}
  - {icao: ZZZ, iata: ZZ, name: Zed Air, country: "NO"}
"""


@pytest.fixture(scope="session")
def registry() -> ReferenceRegistry:
    """Registry built from the bundled reference data."""
    return get_default_registry()


@pytest.fixture(scope="session")
def airlines(registry: ReferenceRegistry) -> AirlineDirectory:
    """Bundled airline catalog."""
    return registry.airlines


@pytest.fixture(scope="session")
def airports(registry: ReferenceRegistry) -> AirportDirectory:
    """Bundled airport catalog."""
    return registry.airports


@pytest.fixture
def sample_data_dir(tmp_path: Path) -> Path:
    """Create a data directory with a small airport and airline catalog."""
    (tmp_path / "airports.csv").write_text(SAMPLE_AIRPORTS_CSV, encoding="utf-8")
    (tmp_path / "airlines.yaml").write_text(SAMPLE_AIRLINES_YAML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def sample_registry(sample_data_dir: Path) -> ReferenceRegistry:
    """Registry built from the small sample catalog."""
    return ReferenceRegistry.from_files(
        sample_data_dir / "airports.csv", sample_data_dir / "airlines.yaml"
    )


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield root

    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
