"""Function surface consumed by the search UI.

Every function accepts an optional ``registry`` keyword. When omitted, the
default registry built from the bundled reference data is used.

Typical usage:
    from aerolens import classify, search_airports, distance_km

    intent = classify("flights near Tokyo")
    airports = search_airports("narita")
"""

from aerolens.airports.database import Airport
from aerolens.aviation import callsign as callsign_utils
from aerolens.aviation.airlines import Airline
from aerolens.core.registry import ReferenceRegistry, get_default_registry
from aerolens.navigation.geodesy import bearing_degrees, distance_km
from aerolens.search import parsers
from aerolens.search.classifier import QueryClassifier
from aerolens.search.intents import GeoIntent, QueryIntent, RouteIntent

__all__ = [
    "bearing_degrees",
    "classify",
    "distance_km",
    "extract_airline_code",
    "extract_flight_number",
    "format_flight_display",
    "get_airline_from_callsign",
    "is_aircraft_type_query",
    "is_private_flight",
    "parse_flight_number",
    "parse_geo_query",
    "parse_route_query",
    "search_airports",
]


def _registry(registry: ReferenceRegistry | None) -> ReferenceRegistry:
    return registry if registry is not None else get_default_registry()


def classify(query: str | None, *, registry: ReferenceRegistry | None = None) -> QueryIntent:
    """Classify search box input into one search intent."""
    return QueryClassifier(_registry(registry)).classify(query)


def parse_flight_number(query: str | None, *, registry: ReferenceRegistry | None = None) -> str | None:
    """Convert "UA123"-style input to an ICAO callsign such as "UAL123"."""
    return parsers.parse_flight_number(query, _registry(registry).airlines)


def parse_geo_query(query: str | None) -> GeoIntent | None:
    """Recognise "near me" and "near <place>" queries."""
    return parsers.parse_geo_query(query)


def parse_route_query(query: str | None) -> RouteIntent | None:
    """Recognise "JFK to LAX"-style queries."""
    return parsers.parse_route_query(query)


def is_aircraft_type_query(query: str | None) -> bool:
    """Check whether input looks like an aircraft type designator."""
    return parsers.is_aircraft_type_query(query)


def search_airports(
    query: str | None, limit: int | None = None, *, registry: ReferenceRegistry | None = None
) -> list[Airport]:
    """Ranked airport search by code, name or city."""
    return _registry(registry).search_airports(query, limit)


def extract_airline_code(callsign: str | None, *, registry: ReferenceRegistry | None = None) -> str | None:
    """ICAO designator a callsign starts with, if it is a known airline."""
    return _registry(registry).airlines.extract_airline_code(callsign)


def get_airline_from_callsign(
    callsign: str | None, *, registry: ReferenceRegistry | None = None
) -> Airline | None:
    """Airline operating a callsign, if known."""
    return _registry(registry).airlines.get_airline_from_callsign(callsign)


def extract_flight_number(callsign: str | None) -> str | None:
    """Flight identifier following the airline designator."""
    return callsign_utils.extract_flight_number(callsign)


def format_flight_display(callsign: str | None, *, registry: ReferenceRegistry | None = None) -> str:
    """Display label such as "United 123"."""
    return _registry(registry).airlines.format_flight_display(callsign)


def is_private_flight(callsign: str | None, *, registry: ReferenceRegistry | None = None) -> bool:
    """True unless the callsign starts with a known airline designator."""
    return _registry(registry).airlines.is_private_flight(callsign)
