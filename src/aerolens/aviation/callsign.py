"""Callsign parsing helpers.

Callsigns broadcast by transponders are either an airline ICAO designator
followed by a flight identifier (``UAL123``) or an aircraft registration
(``N12345``, ``G-ABCD``). The helpers here are pure string functions; the
airline lookups that need a catalog live on ``AirlineDirectory``.

Typical usage:
    from aerolens.aviation.callsign import extract_flight_number, is_registration

    extract_flight_number("BAW12A")  # "12A"
    is_registration("G-EUPT")        # True
"""

import re
from enum import Enum

FLIGHT_NUMBER_PATTERN = re.compile(r"[A-Z]{2,3}(\d+[A-Z]?)", re.ASCII)

# US registrations: N followed by a digit
US_REGISTRATION_PATTERN = re.compile(r"^N\d", re.ASCII)

# UK, German and French registrations: prefix, dash, letter
EUROPEAN_REGISTRATION_PATTERN = re.compile(r"^[GDF]-[A-Z]", re.ASCII)


class CallsignType(Enum):
    """Callsign classification.

    Attributes:
        AIRLINE: Known airline designator + flight identifier (e.g., UAL123)
        REGISTRATION: Aircraft registration marking (e.g., N12345, G-ABCD)
        UNKNOWN: Anything else, treated as private traffic
    """

    AIRLINE = "airline"
    REGISTRATION = "registration"
    UNKNOWN = "unknown"


def normalize_callsign(callsign: str | None) -> str:
    """Trim and uppercase a callsign, mapping None to an empty string.

    Examples:
        >>> normalize_callsign("  ual123 ")
        'UAL123'
    """
    if not callsign:
        return ""
    return callsign.strip().upper()


def extract_flight_number(callsign: str | None) -> str | None:
    """Extract the flight identifier following the airline designator.

    Args:
        callsign: Raw callsign (e.g., "UAL123", "baw12a")

    Returns:
        Digits plus optional trailing letter, or None if no match

    Examples:
        >>> extract_flight_number("UAL123")
        '123'
        >>> extract_flight_number("BAW12A")
        '12A'
        >>> extract_flight_number("N12345") is None
        True
    """
    clean = normalize_callsign(callsign)
    if not clean:
        return None

    match = FLIGHT_NUMBER_PATTERN.search(clean)
    return match.group(1) if match else None


def is_registration(callsign: str | None) -> bool:
    """Check whether a callsign looks like a US or European tail number.

    Examples:
        >>> is_registration("N172SP")
        True
        >>> is_registration("D-EABC")
        True
        >>> is_registration("DLH400")
        False
    """
    clean = normalize_callsign(callsign)
    return bool(US_REGISTRATION_PATTERN.match(clean) or EUROPEAN_REGISTRATION_PATTERN.match(clean))
