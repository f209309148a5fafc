"""Ranked text search over the airport catalog.

The index is a flat list of lowercase keys built once per catalog. Every
airport contributes four keys in a fixed order: ICAO code, IATA code, full
name, city. Queries are scored by prefix and substring matches against those
keys.

Scoring:
    - 100: the key equals the query and is at most 4 characters (code match)
    - 50: the key starts with the query
    - 10: the key contains the query

Typical usage:
    from aerolens.airports import AirportDirectory, SearchIndex

    index = SearchIndex(AirportDirectory.load_from_csv("data/airports.csv"))
    index.search_airports("heath")  # [Airport(icao_code='EGLL', ...)]
"""

import logging
from dataclasses import dataclass

from aerolens.airports.database import Airport, AirportDirectory

logger = logging.getLogger(__name__)

SCORE_CODE_MATCH = 100
SCORE_PREFIX_MATCH = 50
SCORE_SUBSTRING_MATCH = 10

# Keys this short or shorter are airport codes
MAX_CODE_LENGTH = 4


@dataclass(frozen=True)
class SearchIndexEntry:
    """One searchable key pointing back to an airport.

    Attributes:
        normalized_key: Lowercase key text
        icao_code: ICAO code of the airport the key belongs to
    """

    normalized_key: str
    icao_code: str


@dataclass(frozen=True)
class ScoredAirport:
    """Search hit with its relevance score."""

    airport: Airport
    score: int


def score_key(key: str, query: str) -> int:
    """Score one index key against a normalized query.

    Returns:
        Match score, 0 when the key does not match

    Examples:
        >>> score_key("jfk", "jfk")
        100
        >>> score_key("john f. kennedy international", "john")
        50
        >>> score_key("kjfk", "jfk")
        10
    """
    if key.startswith(query):
        if key == query and len(key) <= MAX_CODE_LENGTH:
            return SCORE_CODE_MATCH
        return SCORE_PREFIX_MATCH
    if query in key:
        return SCORE_SUBSTRING_MATCH
    return 0


class SearchIndex:
    """Flattened key index over an airport catalog.

    The scan stops once ``2 * limit`` distinct airports have matched, which
    bounds the cost per keystroke but can miss a better match that sits later
    in the index. Pass ``full_scan=True`` to rank every matching airport.

    Examples:
        >>> index = SearchIndex(directory)
        >>> [a.icao_code for a in index.search_airports("london", limit=3)]
        ['EGLL', 'EGKK', 'EGSS']
    """

    def __init__(
        self,
        directory: AirportDirectory,
        min_query_length: int = 2,
        full_scan: bool = False,
    ) -> None:
        """Build the index.

        Args:
            directory: Airport catalog to index
            min_query_length: Shorter queries return no results
            full_scan: Default for disabling the early exit
        """
        self.directory = directory
        self.min_query_length = min_query_length
        self.full_scan = full_scan

        entries: list[SearchIndexEntry] = []
        for airport in directory:
            for key in (airport.icao_code, airport.iata_code, airport.name, airport.city):
                if key:
                    entries.append(SearchIndexEntry(key.lower(), airport.icao_code))

        self.entries: tuple[SearchIndexEntry, ...] = tuple(entries)
        logger.debug("Built search index with %d keys for %d airports", len(self.entries), len(directory))

    def __len__(self) -> int:
        return len(self.entries)

    def search_scored(
        self, query: str | None, limit: int = 5, full_scan: bool | None = None
    ) -> list[ScoredAirport]:
        """Search airports and return hits with their scores.

        An airport is collected at its first matching key. Later keys of the
        same airport can raise its score but never add it twice, so the code
        match on "jfk" still wins after "kjfk" matched as a substring.

        Args:
            query: Search text (case-insensitive, surrounding whitespace ignored)
            limit: Maximum number of results
            full_scan: Override the index default for the early exit

        Returns:
            Hits ordered by descending score, ties in index order
        """
        q = query.strip().lower() if query else ""
        if len(q) < self.min_query_length or limit <= 0:
            return []

        if full_scan is None:
            full_scan = self.full_scan
        cap = limit * 2

        scores: dict[str, int] = {}
        for entry in self.entries:
            score = score_key(entry.normalized_key, q)
            if not score:
                continue

            previous = scores.get(entry.icao_code)
            if previous is None:
                scores[entry.icao_code] = score
                if not full_scan and len(scores) >= cap:
                    break
            elif score > previous:
                scores[entry.icao_code] = score

        ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)

        hits = []
        for icao, score in ranked[:limit]:
            airport = self.directory.get_airport(icao)
            if airport is not None:
                hits.append(ScoredAirport(airport, score))

        logger.debug("Airport search %r matched %d airports", q, len(scores))
        return hits

    def search_airports(
        self, query: str | None, limit: int = 5, full_scan: bool | None = None
    ) -> list[Airport]:
        """Search airports by code, name or city.

        Args:
            query: Search text (at least 2 characters after trimming)
            limit: Maximum number of results
            full_scan: Override the index default for the early exit

        Returns:
            Matching airports, best first

        Examples:
            >>> index.search_airports("jfk")[0].icao_code
            'KJFK'
            >>> index.search_airports("j")
            []
        """
        return [hit.airport for hit in self.search_scored(query, limit, full_scan)]
