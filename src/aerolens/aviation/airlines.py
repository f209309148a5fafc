"""Airline reference catalog.

The catalog is keyed by 3-letter ICAO designator and carries the 2-character
IATA designator used in marketed flight numbers. A separate flight designator
table says which IATA prefixes are read as flight numbers and which ICAO
prefix each one flies under. Both are loaded once from YAML and exposed
read-only.

Typical usage:
    from aerolens.aviation.airlines import AirlineDirectory

    airlines = AirlineDirectory.load_from_yaml("data/airlines.yaml")
    airlines.resolve_iata("UA")                   # "UAL"
    airlines.format_flight_display("UAL123")      # "United 123"
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

import yaml

from aerolens.aviation.callsign import (
    CallsignType,
    extract_flight_number,
    is_registration,
    normalize_callsign,
)
from aerolens.core.errors import DuplicateKeyError, ReferenceDataError

logger = logging.getLogger(__name__)

# Offset from an ASCII uppercase letter to its regional indicator symbol
_REGIONAL_INDICATOR_OFFSET = 0x1F1E6 - ord("A")


@dataclass(frozen=True)
class Airline:
    """Airline information.

    Attributes:
        icao_code: ICAO designator (e.g., "UAL")
        name: Airline name (e.g., "United Airlines")
        iata_code: IATA designator (e.g., "UA", "5X")
        country_code: ISO 3166 alpha-2 country code
    """

    icao_code: str
    name: str
    iata_code: str
    country_code: str

    @property
    def short_name(self) -> str:
        """First word of the airline name, as shown next to flight numbers."""
        return self.name.split(" ")[0]


class AirlineDirectory:
    """Read-only airline catalog with IATA to ICAO translation.

    The catalog drives callsign display. Flight numbers typed by users are
    read through a separate designator table, which may name carriers the
    catalog files under another code (e.g., AZ flights as ITA while the
    catalog lists ITA Airways as AZA). Without an explicit table the catalog's
    own IATA codes are used.

    Examples:
        >>> directory = AirlineDirectory([Airline("UAL", "United Airlines", "UA", "US")])
        >>> "UAL" in directory
        True
        >>> directory.resolve_iata("ua")
        'UAL'
    """

    def __init__(
        self,
        airlines: Iterable[Airline],
        flight_designators: Iterable[tuple[str, str]] | None = None,
    ) -> None:
        """Build the catalog.

        Args:
            airlines: Airlines to register, in catalog order
            flight_designators: (IATA, ICAO) pairs used to read flight
                numbers. Derived from the catalog when None.

        Raises:
            DuplicateKeyError: If an ICAO or IATA designator appears twice
                in the catalog or in the designator table
        """
        by_icao: dict[str, Airline] = {}
        catalog_iata: dict[str, str] = {}

        for airline in airlines:
            if airline.icao_code in by_icao:
                raise DuplicateKeyError(
                    "airline ICAO", airline.icao_code, by_icao[airline.icao_code].name, airline.name
                )
            by_icao[airline.icao_code] = airline

            if airline.iata_code:
                existing = catalog_iata.get(airline.iata_code)
                if existing is not None:
                    raise DuplicateKeyError("airline IATA", airline.iata_code, existing, airline.icao_code)
                catalog_iata[airline.iata_code] = airline.icao_code

        if flight_designators is None:
            iata_to_icao = catalog_iata
            flight_icao_codes = frozenset(by_icao)
        else:
            iata_to_icao = {}
            icao_to_iata: dict[str, str] = {}
            for iata, icao in flight_designators:
                if iata in iata_to_icao:
                    raise DuplicateKeyError("flight designator IATA", iata, iata_to_icao[iata], icao)
                if icao in icao_to_iata:
                    raise DuplicateKeyError("flight designator ICAO", icao, icao_to_iata[icao], iata)
                iata_to_icao[iata] = icao
                icao_to_iata[icao] = iata
            flight_icao_codes = frozenset(icao_to_iata)

        self._airlines: Mapping[str, Airline] = MappingProxyType(by_icao)
        self._iata_to_icao: Mapping[str, str] = MappingProxyType(iata_to_icao)
        self._icao_codes = frozenset(by_icao)
        self._flight_icao_codes = flight_icao_codes

    @classmethod
    def load_from_yaml(cls, path: str | Path) -> "AirlineDirectory":
        """Load the catalog from a YAML file.

        The file holds an ``airlines`` list whose items have ``icao``,
        ``iata``, ``name`` and ``country`` keys. Items missing a key or with a
        malformed ICAO designator are skipped. An optional
        ``flight_designators`` list of ``iata``/``icao`` items replaces the
        catalog's own IATA codes for reading flight numbers.

        Args:
            path: Path to airlines.yaml

        Returns:
            Loaded directory

        Raises:
            ReferenceDataError: If the file is missing or malformed
            DuplicateKeyError: If a designator appears twice
        """
        path = Path(path)
        if not path.exists():
            raise ReferenceDataError(f"Airlines file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ReferenceDataError(f"Failed to read airlines file {path}: {e}") from e

        entries = data.get("airlines") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise ReferenceDataError(f"Airlines file has no 'airlines' list: {path}")

        airlines = []
        for entry in entries:
            try:
                icao = str(entry["icao"]).strip().upper()
                if len(icao) != 3 or not icao.isalpha():
                    raise ValueError(f"bad ICAO designator {icao!r}")

                airlines.append(
                    Airline(
                        icao_code=icao,
                        name=str(entry["name"]).strip(),
                        iata_code=str(entry.get("iata") or "").strip().upper(),
                        country_code=str(entry.get("country") or "").strip().upper(),
                    )
                )
            except (KeyError, TypeError, ValueError) as e:
                logger.debug("Skipping invalid airline entry %r: %s", entry, e)
                continue

        designators = None
        designator_entries = data.get("flight_designators")
        if designator_entries is not None:
            if not isinstance(designator_entries, list):
                raise ReferenceDataError(f"Airlines file 'flight_designators' is not a list: {path}")

            designators = []
            for entry in designator_entries:
                try:
                    iata = str(entry["iata"]).strip().upper()
                    icao = str(entry["icao"]).strip().upper()
                    if len(iata) != 2 or not iata.isalnum():
                        raise ValueError(f"bad IATA designator {iata!r}")
                    if len(icao) != 3 or not icao.isalpha():
                        raise ValueError(f"bad ICAO designator {icao!r}")
                except (KeyError, TypeError, ValueError) as e:
                    logger.debug("Skipping invalid flight designator %r: %s", entry, e)
                    continue
                designators.append((iata, icao))

        directory = cls(airlines, designators)
        logger.info(
            "Loaded %d airlines and %d flight designators from %s",
            len(directory),
            len(directory.iata_to_icao),
            path,
        )
        return directory

    def __len__(self) -> int:
        return len(self._airlines)

    def __contains__(self, icao_code: object) -> bool:
        return icao_code in self._airlines

    def __iter__(self) -> Iterator[Airline]:
        return iter(self._airlines.values())

    @property
    def icao_codes(self) -> frozenset[str]:
        """All registered ICAO designators."""
        return self._icao_codes

    @property
    def iata_to_icao(self) -> Mapping[str, str]:
        """Read-only IATA to ICAO table used to read flight numbers."""
        return self._iata_to_icao

    def get(self, icao_code: str) -> Airline | None:
        """Get airline by ICAO designator.

        Examples:
            >>> directory.get("BAW").name
            'British Airways'
        """
        return self._airlines.get(icao_code.upper())

    def resolve_iata(self, iata_code: str) -> str | None:
        """Translate an IATA designator to the ICAO designator flights use.

        Returns:
            ICAO designator, or None if the IATA code is unknown

        Examples:
            >>> directory.resolve_iata("AZ")
            'ITA'
        """
        return self._iata_to_icao.get(iata_code.upper())

    def is_flight_designator(self, icao_code: str) -> bool:
        """Check whether a 3-letter code starts a recognised flight number."""
        return icao_code.upper() in self._flight_icao_codes

    def extract_airline_code(self, callsign: str | None) -> str | None:
        """Get the airline designator a callsign starts with.

        Args:
            callsign: Raw callsign (e.g., " dlh400 ")

        Returns:
            ICAO designator if the first 3 characters are a known airline

        Examples:
            >>> directory.extract_airline_code("dlh400")
            'DLH'
            >>> directory.extract_airline_code("N12345") is None
            True
        """
        prefix = normalize_callsign(callsign)[:3]
        return prefix if prefix in self._airlines else None

    def get_airline_from_callsign(self, callsign: str | None) -> Airline | None:
        """Get the airline operating a callsign, if known."""
        code = self.extract_airline_code(callsign)
        if code is None:
            return None
        return self._airlines[code]

    def format_flight_display(self, callsign: str | None) -> str:
        """Format a callsign for display.

        Returns:
            "<airline short name> <flight number>" when both resolve, the
            trimmed callsign otherwise, "Unknown" for empty input

        Examples:
            >>> directory.format_flight_display("UAL123")
            'United 123'
            >>> directory.format_flight_display(" N172SP ")
            'N172SP'
        """
        if not callsign:
            return "Unknown"

        airline = self.get_airline_from_callsign(callsign)
        flight_number = extract_flight_number(callsign)

        if airline and flight_number:
            return f"{airline.short_name} {flight_number}"

        return callsign.strip()

    def classify_callsign(self, callsign: str | None) -> CallsignType:
        """Classify a callsign as airline traffic, a registration or unknown."""
        if self.extract_airline_code(callsign) is not None:
            return CallsignType.AIRLINE
        if is_registration(callsign):
            return CallsignType.REGISTRATION
        return CallsignType.UNKNOWN

    def is_private_flight(self, callsign: str | None) -> bool:
        """Check whether a callsign belongs to private (non-airline) traffic.

        Anything without a known airline prefix counts as private.

        Examples:
            >>> directory.is_private_flight("N172SP")
            True
            >>> directory.is_private_flight("UAL123")
            False
        """
        return self.classify_callsign(callsign) is not CallsignType.AIRLINE

    def search(self, query: str, limit: int = 5) -> list[Airline]:
        """Find airlines by designator or name.

        Exact designator matches rank first, then name prefixes, then
        substrings of the name.

        Args:
            query: Search text (case-insensitive)
            limit: Maximum number of results

        Returns:
            Matching airlines, best first
        """
        q = query.strip().lower() if query else ""
        if len(q) < 2 or limit <= 0:
            return []

        scored: list[tuple[int, Airline]] = []
        for airline in self._airlines.values():
            name = airline.name.lower()
            if q in (airline.icao_code.lower(), airline.iata_code.lower()):
                scored.append((100, airline))
            elif name.startswith(q):
                scored.append((50, airline))
            elif q in name:
                scored.append((10, airline))

        scored.sort(key=lambda item: item[0], reverse=True)
        return [airline for _, airline in scored[:limit]]


def country_flag(country_code: str | None) -> str:
    """Get the flag emoji for an ISO 3166 alpha-2 country code.

    Examples:
        >>> country_flag("fr")
        '🇫🇷'
        >>> country_flag("France")
        ''
    """
    if not country_code:
        return ""

    code = country_code.strip().upper()
    if len(code) != 2 or not (code.isascii() and code.isalpha()):
        return ""

    return "".join(chr(ord(char) + _REGIONAL_INDICATOR_OFFSET) for char in code)
