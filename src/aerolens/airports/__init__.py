"""Airport reference catalog and ranked airport search.

Typical usage:
    from aerolens.airports import AirportDirectory, SearchIndex

    db = AirportDirectory.load_from_csv("data/airports.csv")
    index = SearchIndex(db)

    airport = db.get_airport("KJFK")
    matches = index.search_airports("tokyo", limit=3)
"""

from aerolens.airports.database import Airport, AirportDirectory
from aerolens.airports.search_index import (
    ScoredAirport,
    SearchIndex,
    SearchIndexEntry,
    score_key,
)

__all__ = [
    "Airport",
    "AirportDirectory",
    "ScoredAirport",
    "SearchIndex",
    "SearchIndexEntry",
    "score_key",
]
