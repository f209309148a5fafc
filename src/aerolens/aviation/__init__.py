"""Airline reference data and callsign handling.

Typical usage:
    from aerolens.aviation import AirlineDirectory

    airlines = AirlineDirectory.load_from_yaml("data/airlines.yaml")
    airline = airlines.get_airline_from_callsign("BAW286")
"""

from aerolens.aviation.airlines import Airline, AirlineDirectory, country_flag
from aerolens.aviation.callsign import (
    CallsignType,
    extract_flight_number,
    is_registration,
    normalize_callsign,
)

__all__ = [
    "Airline",
    "AirlineDirectory",
    "CallsignType",
    "country_flag",
    "extract_flight_number",
    "is_registration",
    "normalize_callsign",
]
