"""Rule parsers for free-text search queries.

Each parser recognises one query shape and returns a sentinel (None or False)
for anything else, including empty input. None of them raise.

Recognised shapes:
    - Flight numbers: "UA123", "ua 123", "BA-1234", "AAL789", "5X100"
    - Near me: "near me", "flights near me"
    - Near a place: "near New York", "flights around Paris", "close to LHR"
    - Routes: "JFK to LAX", "JFK→LAX", "JFK->LAX", "JFK-LAX", "JFK LAX"
    - Aircraft types: "B737", "A320", "E190", "CRJ7", "A20N"
"""

import re

from aerolens.aviation.airlines import AirlineDirectory
from aerolens.search.intents import (
    FlightNumberIntent,
    GeoIntent,
    GeoNearLocationIntent,
    GeoNearMeIntent,
    RouteIntent,
)

_FLAGS = re.IGNORECASE | re.ASCII

# Letter classes stay ASCII. Whitespace also covers the Unicode spaces
# (no-break, ideographic, line separators). A place name ends at a line break.
_WS = r"[\s\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"
_ANY = r"[^\n\r\u2028\u2029]"

# Two alphanumeric characters (IATA, e.g. B6, U2, 5X) or three letters (ICAO),
# one optional space or dash, then 1-4 digits.
FLIGHT_NUMBER_PATTERN = re.compile(rf"([A-Z0-9][A-Z0-9]|[A-Z]{{3}})(?:{_WS}|-)?([0-9]{{1,4}})", _FLAGS)

NEAR_ME_PATTERN = re.compile(rf"(?:flights?{_WS}+)?near{_WS}+me", _FLAGS)
GEO_PATTERN = re.compile(rf"(?:flights?{_WS}+)?(?:near|around|close{_WS}+to){_WS}+({_ANY}+)", _FLAGS)

ROUTE_PATTERNS = (
    re.compile(rf"([A-Z]{{3,4}}){_WS}*(?:to|→|->|-){_WS}*([A-Z]{{3,4}})", _FLAGS),
    re.compile(rf"([A-Z]{{3,4}}){_WS}+([A-Z]{{3,4}})", _FLAGS),
)
MIN_ROUTE_LENGTH = 5

AIRCRAFT_TYPE_PATTERN = re.compile(r"[A-Z]{1,3}[0-9]{1,3}[A-Z0-9]?", _FLAGS)


def _clean(query: str | None) -> str:
    return query.strip() if query else ""


def match_flight_number(query: str | None, airlines: AirlineDirectory) -> FlightNumberIntent | None:
    """Recognise a flight number and translate it to an ICAO callsign.

    Three-letter codes must be ICAO flight designators; two-character codes
    are translated through the flight designator table.

    Args:
        query: Raw query text
        airlines: Airline catalog used for validation and translation

    Returns:
        FlightNumberIntent, or None if the text is not a known flight number

    Examples:
        >>> match_flight_number("ua 123", airlines).callsign
        'UAL123'
        >>> match_flight_number("XX123", airlines) is None
        True
    """
    match = FLIGHT_NUMBER_PATTERN.fullmatch(_clean(query))
    if not match:
        return None

    code = match.group(1).upper()
    digits = match.group(2)

    if len(code) == 3:
        icao = code if airlines.is_flight_designator(code) else None
    else:
        icao = airlines.resolve_iata(code)

    if icao is None:
        return None

    return FlightNumberIntent(icao_callsign_prefix=icao, flight_digits=digits)


def parse_flight_number(query: str | None, airlines: AirlineDirectory) -> str | None:
    """Convert a flight number to ICAO callsign form.

    Examples:
        >>> parse_flight_number("DL456", airlines)
        'DAL456'
        >>> parse_flight_number("UA12345", airlines) is None
        True
    """
    intent = match_flight_number(query, airlines)
    return intent.callsign if intent else None


def parse_geo_query(query: str | None) -> GeoIntent | None:
    """Recognise a proximity query.

    Returns:
        GeoNearMeIntent for "near me", GeoNearLocationIntent with the place
        text (trimmed, case preserved) for "near <place>", None otherwise

    Examples:
        >>> parse_geo_query("Flights near me")
        GeoNearMeIntent()
        >>> parse_geo_query("around  San Francisco ")
        GeoNearLocationIntent(location_text='San Francisco')
    """
    trimmed = _clean(query)

    if NEAR_ME_PATTERN.fullmatch(trimmed):
        return GeoNearMeIntent()

    match = GEO_PATTERN.fullmatch(trimmed)
    if match:
        location = match.group(1).strip()
        if location:
            return GeoNearLocationIntent(location_text=location)

    return None


def parse_route_query(query: str | None) -> RouteIntent | None:
    """Recognise an origin/destination pair of airport codes.

    Examples:
        >>> parse_route_query("jfk to lax")
        RouteIntent(origin_code='JFK', destination_code='LAX')
        >>> parse_route_query("JFK") is None
        True
    """
    trimmed = _clean(query)
    if len(trimmed) < MIN_ROUTE_LENGTH:
        return None

    for pattern in ROUTE_PATTERNS:
        match = pattern.fullmatch(trimmed)
        if match:
            return RouteIntent(
                origin_code=match.group(1).upper(),
                destination_code=match.group(2).upper(),
            )

    return None


def is_aircraft_type_query(query: str | None) -> bool:
    """Check whether a query looks like an aircraft type designator.

    Examples:
        >>> is_aircraft_type_query("b737")
        True
        >>> is_aircraft_type_query("737")
        False
    """
    return AIRCRAFT_TYPE_PATTERN.fullmatch(_clean(query)) is not None
