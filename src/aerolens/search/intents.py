"""Structured search intents.

A classified query is exactly one of the intent classes below. Each is a
frozen dataclass tagged with an ``IntentKind`` so callers can dispatch on
``intent.kind`` or with ``match`` on the class.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class IntentKind(Enum):
    """Search intent type."""

    FLIGHT_NUMBER = "flight_number"
    GEO_NEAR_ME = "near_me"
    GEO_NEAR_LOCATION = "near_location"
    ROUTE = "route"
    AIRCRAFT_TYPE = "aircraft_type"
    FREE_TEXT = "free_text"


@dataclass(frozen=True)
class FlightNumberIntent:
    """Flight lookup by ICAO callsign.

    Attributes:
        icao_callsign_prefix: Airline ICAO designator (e.g., "UAL")
        flight_digits: Flight number digits (e.g., "123")
    """

    kind: ClassVar[IntentKind] = IntentKind.FLIGHT_NUMBER

    icao_callsign_prefix: str
    flight_digits: str

    @property
    def callsign(self) -> str:
        """Callsign as broadcast by the aircraft (e.g., "UAL123")."""
        return f"{self.icao_callsign_prefix}{self.flight_digits}"


@dataclass(frozen=True)
class GeoNearMeIntent:
    """Flights around the user's own position."""

    kind: ClassVar[IntentKind] = IntentKind.GEO_NEAR_ME


@dataclass(frozen=True)
class GeoNearLocationIntent:
    """Flights around a named place.

    Attributes:
        location_text: Place as typed, case preserved (e.g., "New York")
    """

    kind: ClassVar[IntentKind] = IntentKind.GEO_NEAR_LOCATION

    location_text: str


@dataclass(frozen=True)
class RouteIntent:
    """Flights between two airports.

    Attributes:
        origin_code: Upper-cased IATA or ICAO code of the origin
        destination_code: Upper-cased IATA or ICAO code of the destination
    """

    kind: ClassVar[IntentKind] = IntentKind.ROUTE

    origin_code: str
    destination_code: str


@dataclass(frozen=True)
class AircraftTypeIntent:
    """Flights operated by an aircraft type.

    Attributes:
        type_code: Upper-cased type designator (e.g., "B737", "A20N")
    """

    kind: ClassVar[IntentKind] = IntentKind.AIRCRAFT_TYPE

    type_code: str


@dataclass(frozen=True)
class FreeTextIntent:
    """Anything no rule recognised, resolved later by text search.

    Attributes:
        raw: Trimmed query text
    """

    kind: ClassVar[IntentKind] = IntentKind.FREE_TEXT

    raw: str = ""


GeoIntent = GeoNearMeIntent | GeoNearLocationIntent

QueryIntent = (
    FlightNumberIntent
    | GeoNearMeIntent
    | GeoNearLocationIntent
    | RouteIntent
    | AircraftTypeIntent
    | FreeTextIntent
)
