"""
Spherical-earth geometry helpers
"""
import math
from dataclasses import dataclass
from typing import Iterable

from haversine import haversine

EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class Coordinate:
    """Latitude/longitude in degrees"""
    lat: float
    lng: float

    def as_tuple(self):
        return (self.lat, self.lng)


def project(origin: Coordinate, distance_km: float, bearing_deg: float) -> Coordinate:
    """
    Destination reached from origin after distance_km along bearing_deg
    (great-circle destination formula).

    The resulting longitude is not wrapped into [-180, 180].
    """
    angular = distance_km / EARTH_RADIUS_KM
    theta = math.radians(bearing_deg)
    phi1 = math.radians(origin.lat)
    lambda1 = math.radians(origin.lng)

    phi2 = math.asin(
        math.sin(phi1) * math.cos(angular) +
        math.cos(phi1) * math.sin(angular) * math.cos(theta)
    )
    lambda2 = lambda1 + math.atan2(
        math.sin(theta) * math.sin(angular) * math.cos(phi1),
        math.cos(angular) - math.sin(phi1) * math.sin(phi2)
    )

    return Coordinate(lat=math.degrees(phi2), lng=math.degrees(lambda2))


def parse_coordinate(text: str) -> Coordinate:
    """Parse a "lat, lng" string into a Coordinate"""
    parts = [part.strip() for part in (text or "").split(",")]
    if len(parts) != 2:
        raise ValueError("Start location must be given as 'lat, lng'")

    try:
        lat, lng = float(parts[0]), float(parts[1])
    except ValueError:
        raise ValueError(f"Could not parse coordinates from '{text}'")

    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise ValueError(f"Could not parse coordinates from '{text}'")
    if not -90.0 <= lat <= 90.0:
        raise ValueError(f"Latitude {lat} is outside [-90, 90]")
    if not -180.0 <= lng <= 180.0:
        raise ValueError(f"Longitude {lng} is outside [-180, 180]")

    return Coordinate(lat=lat, lng=lng)


def loop_length_km(points: Iterable[Coordinate]) -> float:
    """Straight-line length of a polyline in km"""
    points = list(points)
    return sum(
        haversine(a.as_tuple(), b.as_tuple())
        for a, b in zip(points, points[1:])
    )
