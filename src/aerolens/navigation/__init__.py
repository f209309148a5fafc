"""Great-circle geometry used by geo-search and the measurement tool.

Typical usage:
    from aerolens.navigation import bearing_degrees, distance_km

    km = distance_km(51.47, -0.4543, 49.0097, 2.5479)
"""

from aerolens.navigation.geodesy import (
    EARTH_RADIUS_KM,
    MAX_DISTANCE_KM,
    bearing_degrees,
    destination_point,
    distance_km,
    distance_nm,
    distances_km,
    format_bearing,
    format_distance,
)

__all__ = [
    "EARTH_RADIUS_KM",
    "MAX_DISTANCE_KM",
    "bearing_degrees",
    "destination_point",
    "distance_km",
    "distance_nm",
    "distances_km",
    "format_bearing",
    "format_distance",
]
