"""Airport reference catalog.

This module loads the airport catalog used by search and geo queries. The
catalog is keyed by ICAO code, carries the IATA code passengers know, and is
read-only once built.

Typical usage:
    db = AirportDirectory.load_from_csv("data/airports.csv")

    airport = db.get_airport("KSFO")
    same = db.resolve_code("sfo")
    nearby = db.get_airports_near(37.62, -122.38, radius_km=100)
"""

import csv
import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

import numpy as np

from aerolens.core.errors import DuplicateKeyError, ReferenceDataError
from aerolens.navigation.geodesy import distances_km

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("icao", "iata", "name", "city", "country", "lat", "lon")


@dataclass(frozen=True)
class Airport:
    """Airport information.

    Attributes:
        icao_code: ICAO code (e.g., "KJFK")
        iata_code: IATA code (e.g., "JFK")
        name: Airport name
        city: City served
        country_code: ISO 3166 alpha-2 country code
        latitude: Latitude in degrees
        longitude: Longitude in degrees
    """

    icao_code: str
    iata_code: str
    name: str
    city: str
    country_code: str
    latitude: float
    longitude: float


class AirportDirectory:
    """Read-only airport catalog with IATA lookup and proximity queries.

    Examples:
        >>> db = AirportDirectory.load_from_csv("data/airports.csv")
        >>> db.get_airport("EGLL").city
        'London'
        >>> db.resolve_code("LHR").icao_code
        'EGLL'
    """

    def __init__(self, airports: Iterable[Airport]) -> None:
        """Build the catalog.

        Args:
            airports: Airports in catalog order. The order is kept and drives
                search index order.

        Raises:
            DuplicateKeyError: If an ICAO or IATA code appears twice
        """
        by_icao: dict[str, Airport] = {}
        iata_to_icao: dict[str, str] = {}

        for airport in airports:
            if airport.icao_code in by_icao:
                raise DuplicateKeyError(
                    "airport ICAO", airport.icao_code, by_icao[airport.icao_code].name, airport.name
                )
            by_icao[airport.icao_code] = airport

            if airport.iata_code:
                existing = iata_to_icao.get(airport.iata_code)
                if existing is not None:
                    raise DuplicateKeyError("airport IATA", airport.iata_code, existing, airport.icao_code)
                iata_to_icao[airport.iata_code] = airport.icao_code

        self._airports: Mapping[str, Airport] = MappingProxyType(by_icao)
        self._iata_to_icao: Mapping[str, str] = MappingProxyType(iata_to_icao)

        ordered = tuple(by_icao.values())
        self._ordered = ordered
        self._latitudes = np.array([a.latitude for a in ordered], dtype=np.float64)
        self._longitudes = np.array([a.longitude for a in ordered], dtype=np.float64)
        self._latitudes.setflags(write=False)
        self._longitudes.setflags(write=False)

    @classmethod
    def load_from_csv(cls, csv_path: str | Path) -> "AirportDirectory":
        """Load the catalog from a CSV file.

        The file needs the columns icao, iata, name, city, country, lat, lon.
        Rows with a malformed ICAO code or coordinates are skipped.

        Args:
            csv_path: Path to airports.csv

        Returns:
            Loaded directory

        Raises:
            ReferenceDataError: If the file is missing or lacks required columns
            DuplicateKeyError: If a code appears twice
        """
        csv_path = Path(csv_path)
        if not csv_path.exists():
            raise ReferenceDataError(f"Airports file not found: {csv_path}")

        logger.info("Loading airports from %s", csv_path)

        airports = []
        with open(csv_path, encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)

            missing = [col for col in REQUIRED_COLUMNS if col not in (reader.fieldnames or [])]
            if missing:
                raise ReferenceDataError(f"Airports file {csv_path} lacks columns: {', '.join(missing)}")

            for row in reader:
                try:
                    icao = row["icao"].strip().upper()
                    if len(icao) != 4 or not icao.isalnum():
                        raise ValueError(f"bad ICAO code {icao!r}")

                    latitude = float(row["lat"])
                    longitude = float(row["lon"])
                    if not (-90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0):
                        raise ValueError(f"coordinates out of range ({latitude}, {longitude})")

                    airports.append(
                        Airport(
                            icao_code=icao,
                            iata_code=(row["iata"] or "").strip().upper(),
                            name=(row["name"] or "").strip(),
                            city=(row["city"] or "").strip(),
                            country_code=(row["country"] or "").strip().upper(),
                            latitude=latitude,
                            longitude=longitude,
                        )
                    )

                except (ValueError, KeyError, AttributeError) as e:
                    logger.debug("Skipping invalid airport row: %s", e)
                    continue

        directory = cls(airports)
        logger.info("Loaded %d airports", directory.airport_count())
        return directory

    def __len__(self) -> int:
        return len(self._airports)

    def __iter__(self) -> Iterator[Airport]:
        return iter(self._ordered)

    def __contains__(self, icao_code: object) -> bool:
        return icao_code in self._airports

    @property
    def iata_to_icao(self) -> Mapping[str, str]:
        """Read-only IATA to ICAO airport code table."""
        return self._iata_to_icao

    def get_airport(self, icao: str) -> Airport | None:
        """Get airport by ICAO code.

        Args:
            icao: ICAO code (e.g., "KJFK"), any case

        Returns:
            Airport if found, None otherwise
        """
        return self._airports.get(icao.strip().upper())

    def get_by_iata(self, iata: str) -> Airport | None:
        """Get airport by IATA code."""
        icao = self._iata_to_icao.get(iata.strip().upper())
        return self._airports[icao] if icao else None

    def resolve_code(self, code: str) -> Airport | None:
        """Resolve a 3-letter IATA or 4-letter ICAO code.

        Examples:
            >>> db.resolve_code("cdg").icao_code
            'LFPG'
            >>> db.resolve_code("LFPG").iata_code
            'CDG'
        """
        code = code.strip().upper()
        if len(code) == 3:
            return self.get_by_iata(code)
        if len(code) == 4:
            return self.get_airport(code)
        return None

    def get_airports_near(
        self, latitude: float, longitude: float, radius_km: float, limit: int | None = None
    ) -> list[tuple[Airport, float]]:
        """Get airports within radius of a position.

        Args:
            latitude: Center latitude in degrees
            longitude: Center longitude in degrees
            radius_km: Search radius in kilometres
            limit: Maximum number of results (all if None)

        Returns:
            List of (airport, distance_km) tuples, nearest first

        Examples:
            >>> for airport, km in db.get_airports_near(51.5, -0.12, 60):
            ...     print(f"{airport.iata_code}: {km:.0f} km")
        """
        if not self._ordered:
            return []

        distances = distances_km(latitude, longitude, self._latitudes, self._longitudes)
        within = np.flatnonzero(distances <= radius_km)
        order = within[np.argsort(distances[within], kind="stable")]
        if limit is not None:
            order = order[: max(limit, 0)]

        return [(self._ordered[i], float(distances[i])) for i in order]

    def airport_count(self) -> int:
        """Get total number of airports in the catalog."""
        return len(self._airports)

    def get_countries(self) -> list[str]:
        """Get sorted ISO country codes that have at least one airport."""
        return sorted({airport.country_code for airport in self._ordered})
