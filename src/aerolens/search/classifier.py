"""Free-text search query classifier.

Turns whatever the user typed into exactly one search intent by trying a
fixed chain of rules and returning on the first match:

    1. Flight number ("UA123", "BAW 286")
    2. Near me ("flights near me")
    3. Near a place ("near New York")
    4. Route ("JFK to LAX")
    5. Aircraft type ("B737")
    6. Free text (anything else)

The order matters: "UA123" also looks like an aircraft type, and the flight
number rule must win.

Typical usage:
    from aerolens.search import QueryClassifier

    classifier = QueryClassifier(registry)
    intent = classifier.classify("ba 286")
    if intent.kind is IntentKind.FLIGHT_NUMBER:
        track(intent.callsign)
"""

import logging
from dataclasses import dataclass

from aerolens.airports.database import Airport
from aerolens.aviation.airlines import Airline
from aerolens.core.registry import ReferenceRegistry
from aerolens.search.intents import (
    AircraftTypeIntent,
    FreeTextIntent,
    QueryIntent,
    RouteIntent,
)
from aerolens.search.parsers import (
    is_aircraft_type_query,
    match_flight_number,
    parse_geo_query,
    parse_route_query,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FreeTextMatches:
    """Reference data matching a free-text query.

    Attributes:
        airports: Matching airports, best first
        airlines: Matching airlines, best first
    """

    airports: tuple[Airport, ...] = ()
    airlines: tuple[Airline, ...] = ()

    def is_empty(self) -> bool:
        return not self.airports and not self.airlines


@dataclass(frozen=True)
class ResolvedRoute:
    """Route endpoints looked up in the airport catalog.

    Either side is None when its code is not in the catalog.
    """

    origin: Airport | None
    destination: Airport | None

    def is_complete(self) -> bool:
        return self.origin is not None and self.destination is not None


class QueryClassifier:
    """Classifies search box input into search intents.

    The classifier holds no mutable state; one instance can serve any number
    of concurrent callers.

    Examples:
        >>> classifier = QueryClassifier(registry)
        >>> classifier.classify("UA123")
        FlightNumberIntent(icao_callsign_prefix='UAL', flight_digits='123')
        >>> classifier.classify("near me")
        GeoNearMeIntent()
        >>> classifier.classify("heathrow")
        FreeTextIntent(raw='heathrow')
    """

    def __init__(self, registry: ReferenceRegistry) -> None:
        """Initialize classifier.

        Args:
            registry: Reference data for airline validation and free-text lookup
        """
        self.registry = registry

    def classify(self, query: str | None) -> QueryIntent:
        """Classify a raw query.

        Args:
            query: Text as typed; None and blank input become an empty FreeTextIntent

        Returns:
            Exactly one intent
        """
        text = query.strip() if query else ""

        intent = self._classify(text)
        logger.debug("Classified %r as %s", text, intent.kind.value)
        return intent

    def _classify(self, text: str) -> QueryIntent:
        if not text:
            return FreeTextIntent(raw="")

        flight = match_flight_number(text, self.registry.airlines)
        if flight is not None:
            return flight

        geo = parse_geo_query(text)
        if geo is not None:
            return geo

        route = parse_route_query(text)
        if route is not None:
            return route

        if is_aircraft_type_query(text):
            return AircraftTypeIntent(type_code=text.upper())

        return FreeTextIntent(raw=text)

    def resolve_free_text(self, intent: FreeTextIntent, limit: int | None = None) -> FreeTextMatches:
        """Look up airports and airlines matching a free-text intent.

        Args:
            intent: Fallback intent from classify()
            limit: Maximum results per catalog (registry default if None)

        Returns:
            Airports and airlines whose codes or names match
        """
        if limit is None:
            limit = self.registry.settings.default_limit

        airports = self.registry.search_airports(intent.raw, limit)
        airlines = self.registry.airlines.search(intent.raw, limit)
        return FreeTextMatches(airports=tuple(airports), airlines=tuple(airlines))

    def resolve_route(self, intent: RouteIntent) -> ResolvedRoute:
        """Look up both route endpoints by IATA or ICAO code.

        Examples:
            >>> route = classifier.resolve_route(RouteIntent("JFK", "EGLL"))
            >>> route.destination.name
            'London Heathrow'
        """
        airports = self.registry.airports
        return ResolvedRoute(
            origin=airports.resolve_code(intent.origin_code),
            destination=airports.resolve_code(intent.destination_code),
        )
