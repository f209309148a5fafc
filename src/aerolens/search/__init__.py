"""Search query interpretation.

Typical usage:
    from aerolens.search import QueryClassifier, IntentKind

    intent = QueryClassifier(registry).classify("JFK to LAX")
    assert intent.kind is IntentKind.ROUTE
"""

from aerolens.search.classifier import FreeTextMatches, QueryClassifier, ResolvedRoute
from aerolens.search.intents import (
    AircraftTypeIntent,
    FlightNumberIntent,
    FreeTextIntent,
    GeoIntent,
    GeoNearLocationIntent,
    GeoNearMeIntent,
    IntentKind,
    QueryIntent,
    RouteIntent,
)
from aerolens.search.parsers import (
    is_aircraft_type_query,
    match_flight_number,
    parse_flight_number,
    parse_geo_query,
    parse_route_query,
)

__all__ = [
    "AircraftTypeIntent",
    "FlightNumberIntent",
    "FreeTextIntent",
    "FreeTextMatches",
    "GeoIntent",
    "GeoNearLocationIntent",
    "GeoNearMeIntent",
    "IntentKind",
    "QueryClassifier",
    "QueryIntent",
    "ResolvedRoute",
    "RouteIntent",
    "is_aircraft_type_query",
    "match_flight_number",
    "parse_flight_number",
    "parse_geo_query",
    "parse_route_query",
]
