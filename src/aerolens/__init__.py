"""AeroLens search core.

Interprets free-text flight search input and resolves it against airport and
airline reference data.

Typical usage:
    import aerolens

    intent = aerolens.classify("UA 123")
    airports = aerolens.search_airports("heathrow")
    km = aerolens.distance_km(40.6413, -73.7781, 51.47, -0.4543)
"""

from aerolens.api import (
    bearing_degrees,
    classify,
    distance_km,
    extract_airline_code,
    extract_flight_number,
    format_flight_display,
    get_airline_from_callsign,
    is_aircraft_type_query,
    is_private_flight,
    parse_flight_number,
    parse_geo_query,
    parse_route_query,
    search_airports,
)
from aerolens.core.registry import ReferenceRegistry, get_default_registry

__version__ = "0.1.0"

__all__ = [
    "ReferenceRegistry",
    "bearing_degrees",
    "classify",
    "distance_km",
    "extract_airline_code",
    "extract_flight_number",
    "format_flight_display",
    "get_airline_from_callsign",
    "get_default_registry",
    "is_aircraft_type_query",
    "is_private_flight",
    "parse_flight_number",
    "parse_geo_query",
    "parse_route_query",
    "search_airports",
]
