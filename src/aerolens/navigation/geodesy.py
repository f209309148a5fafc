"""Great-circle geometry on a spherical Earth.

Distances use the haversine formula with a mean Earth radius of 6371 km.
All functions are pure and return finite values for finite input.

Typical usage:
    from aerolens.navigation.geodesy import bearing_degrees, distance_km

    km = distance_km(40.6413, -73.7781, 33.9425, -118.4081)  # JFK -> LAX
    hdg = bearing_degrees(40.6413, -73.7781, 33.9425, -118.4081)
"""

import math

import numpy as np
import numpy.typing as npt

EARTH_RADIUS_KM = 6371.0
KM_PER_NM = 1.852
NM_PER_KM = 1.0 / KM_PER_NM

# Half the circumference of the reference sphere.
MAX_DISTANCE_KM = math.pi * EARTH_RADIUS_KM


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate great-circle distance between two points.

    Args:
        lat1: Latitude of the first point in degrees
        lon1: Longitude of the first point in degrees
        lat2: Latitude of the second point in degrees
        lon2: Longitude of the second point in degrees

    Returns:
        Distance in kilometres, in [0, MAX_DISTANCE_KM]

    Examples:
        >>> round(distance_km(51.47, -0.4543, 49.0097, 2.5479))
        347
        >>> distance_km(10.0, 20.0, 10.0, 20.0)
        0.0
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    # Rounding can push a marginally outside [0, 1] for near-antipodal points.
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def distance_nm(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate great-circle distance in nautical miles.

    Examples:
        >>> round(distance_nm(0.0, 0.0, 0.0, 1.0), 1)
        60.0
    """
    return distance_km(lat1, lon1, lat2, lon2) * NM_PER_KM


def bearing_degrees(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate the initial great-circle bearing from point 1 to point 2.

    Args:
        lat1: Latitude of the origin in degrees
        lon1: Longitude of the origin in degrees
        lat2: Latitude of the target in degrees
        lon2: Longitude of the target in degrees

    Returns:
        Compass bearing in [0, 360). Coincident points yield 0.0.

    Examples:
        >>> bearing_degrees(0.0, 0.0, 1.0, 0.0)
        0.0
        >>> round(bearing_degrees(0.0, 0.0, 0.0, 1.0))
        90
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dlambda = math.radians(lon2 - lon1)

    y = math.sin(dlambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(dlambda)

    bearing = (math.degrees(math.atan2(y, x)) + 360.0) % 360.0
    # -0.0 and values that round up to 360.0
    if bearing >= 360.0 or bearing == 0.0:
        return 0.0
    return bearing


def destination_point(
    lat: float, lon: float, bearing_deg: float, dist_km: float
) -> tuple[float, float]:
    """Project a point along a great circle.

    Args:
        lat: Start latitude in degrees
        lon: Start longitude in degrees
        bearing_deg: Initial bearing in degrees
        dist_km: Distance to travel in kilometres

    Returns:
        (latitude, longitude) of the destination, longitude in [-180, 180)

    Examples:
        >>> lat, lon = destination_point(0.0, 0.0, 90.0, 111.19)
        >>> round(lat, 3), round(lon, 2)
        (0.0, 1.0)
    """
    delta = dist_km / EARTH_RADIUS_KM
    theta = math.radians(bearing_deg)
    phi1 = math.radians(lat)
    lambda1 = math.radians(lon)

    sin_phi2 = math.sin(phi1) * math.cos(delta) + math.cos(phi1) * math.sin(delta) * math.cos(theta)
    phi2 = math.asin(min(1.0, max(-1.0, sin_phi2)))
    lambda2 = lambda1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(phi1),
        math.cos(delta) - math.sin(phi1) * math.sin(phi2),
    )

    lon2 = (math.degrees(lambda2) + 540.0) % 360.0 - 180.0
    return math.degrees(phi2), lon2


def distances_km(
    lat: float, lon: float, lats: npt.ArrayLike, lons: npt.ArrayLike
) -> npt.NDArray[np.float64]:
    """Vectorised haversine distance from one point to many.

    Args:
        lat: Origin latitude in degrees
        lon: Origin longitude in degrees
        lats: Target latitudes in degrees
        lons: Target longitudes in degrees (same shape as lats)

    Returns:
        Array of distances in kilometres

    Examples:
        >>> distances_km(0.0, 0.0, [0.0, 0.0], [0.0, 180.0]).round()
        array([    0., 20015.])
    """
    phi1 = np.radians(lat)
    phi2 = np.radians(np.asarray(lats, dtype=np.float64))
    dphi = phi2 - phi1
    dlambda = np.radians(np.asarray(lons, dtype=np.float64) - lon)

    a = np.sin(dphi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(dlambda / 2) ** 2
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def format_distance(km: float) -> str:
    """Format a distance for display.

    Examples:
        >>> format_distance(0.85)
        '850 m'
        >>> format_distance(12.34)
        '12.3 km (6.7 nm)'
        >>> format_distance(3944.2)
        '3944 km (2130 nm)'
    """
    if km < 1:
        return f"{round(km * 1000)} m"
    if km < 100:
        return f"{km:.1f} km ({km * NM_PER_KM:.1f} nm)"
    return f"{round(km)} km ({round(km * NM_PER_KM)} nm)"


def format_bearing(bearing_deg: float) -> str:
    """Format a bearing as whole degrees.

    Examples:
        >>> format_bearing(244.6)
        '245°'
        >>> format_bearing(359.7)
        '0°'
    """
    return f"{round(bearing_deg) % 360}°"
