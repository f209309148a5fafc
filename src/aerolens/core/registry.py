"""Immutable reference data registry.

The registry bundles the airline catalog, the airport catalog and the airport
search index. It is built once, never mutated, and handed to the classifier
and the search functions. A lazily built default registry backed by the
bundled data serves callers that do not inject their own.

Typical usage example:
    from aerolens.core.registry import ReferenceRegistry, get_default_registry

    registry = get_default_registry()
    registry.airlines.resolve_iata("BA")        # "BAW"
    registry.search_airports("paris", limit=2)

    custom = ReferenceRegistry.from_files("airports.csv", "airlines.yaml")
"""

import functools
import logging
from dataclasses import dataclass
from pathlib import Path

from aerolens.airports.database import Airport, AirportDirectory
from aerolens.airports.search_index import SearchIndex
from aerolens.aviation.airlines import AirlineDirectory
from aerolens.core.config import ConfigLoader
from aerolens.core.errors import ReferenceDataError
from aerolens.core.resource_path import get_data_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchSettings:
    """Airport search tuning.

    Attributes:
        default_limit: Result count when the caller gives none
        min_query_length: Shorter queries return nothing
        full_scan: Rank every match instead of stopping at 2 x limit
    """

    default_limit: int = 5
    min_query_length: int = 2
    full_scan: bool = False

    @classmethod
    def from_config(cls, config: ConfigLoader) -> "SearchSettings":
        """Read settings from the ``search`` section, falling back to defaults."""
        defaults = cls()
        full_scan = config.get("search.full_scan", defaults.full_scan)
        if not isinstance(full_scan, bool):
            raise ReferenceDataError(f"Invalid search settings: search.full_scan must be a boolean, got {full_scan!r}")

        try:
            return cls(
                default_limit=int(config.get("search.default_limit", defaults.default_limit)),
                min_query_length=int(config.get("search.min_query_length", defaults.min_query_length)),
                full_scan=full_scan,
            )
        except (TypeError, ValueError) as e:
            raise ReferenceDataError(f"Invalid search settings: {e}") from e


class ReferenceRegistry:
    """Read-only bundle of reference catalogs.

    Examples:
        >>> registry = ReferenceRegistry(airlines, airports)
        >>> registry.airports.get_airport("KJFK").name
        'John F. Kennedy International'
    """

    def __init__(
        self,
        airlines: AirlineDirectory,
        airports: AirportDirectory,
        settings: SearchSettings | None = None,
    ) -> None:
        """Assemble a registry and build its search index.

        Args:
            airlines: Airline catalog
            airports: Airport catalog
            settings: Search tuning (defaults if None)
        """
        self._airlines = airlines
        self._airports = airports
        self._settings = settings or SearchSettings()
        self._index = SearchIndex(
            airports,
            min_query_length=self._settings.min_query_length,
            full_scan=self._settings.full_scan,
        )

        logger.info(
            "Reference registry ready: %d airlines, %d airports, %d index keys",
            len(airlines),
            len(airports),
            len(self._index),
        )

    @classmethod
    def from_files(
        cls,
        airports_csv: str | Path,
        airlines_yaml: str | Path,
        settings: SearchSettings | None = None,
    ) -> "ReferenceRegistry":
        """Load both catalogs from disk.

        Raises:
            ReferenceDataError: If a file is missing or inconsistent
        """
        airlines = AirlineDirectory.load_from_yaml(airlines_yaml)
        airports = AirportDirectory.load_from_csv(airports_csv)
        return cls(airlines, airports, settings)

    @classmethod
    def from_config(cls, config: ConfigLoader) -> "ReferenceRegistry":
        """Build a registry from ``data`` and ``search`` settings.

        Relative data paths resolve against the bundled data directory.

        Raises:
            ReferenceDataError: If a data path is unset or a file is invalid
        """
        data_dir = get_data_path()
        airports_csv = config.resolve_path("data.airports", data_dir)
        airlines_yaml = config.resolve_path("data.airlines", data_dir)

        if airports_csv is None or airlines_yaml is None:
            raise ReferenceDataError("Configuration must set data.airports and data.airlines")

        return cls.from_files(airports_csv, airlines_yaml, SearchSettings.from_config(config))

    @property
    def airlines(self) -> AirlineDirectory:
        return self._airlines

    @property
    def airports(self) -> AirportDirectory:
        return self._airports

    @property
    def index(self) -> SearchIndex:
        return self._index

    @property
    def settings(self) -> SearchSettings:
        return self._settings

    def search_airports(self, query: str | None, limit: int | None = None) -> list[Airport]:
        """Search airports with the registry's default limit and scan mode."""
        if limit is None:
            limit = self._settings.default_limit
        return self._index.search_airports(query, limit)


@functools.lru_cache(maxsize=1)
def get_default_registry() -> ReferenceRegistry:
    """Get the registry built from the bundled settings and data.

    Built on first call and shared afterwards. Call
    ``get_default_registry.cache_clear()`` to force a rebuild.

    Raises:
        ReferenceDataError: If the bundled data is inconsistent
    """
    return ReferenceRegistry.from_config(ConfigLoader.load_default())
