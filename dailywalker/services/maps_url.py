"""
Google Maps directions deep links
"""
from typing import Iterable, Union

from dailywalker.models import TravelMode
from dailywalker.services.geodesy import Coordinate

MAPS_DIR_URL = "https://www.google.com/maps/dir/"

# Google Maps URL travelmode values
TRAVEL_MODE_PARAMS = {
    TravelMode.WALKING: "walking",
    TravelMode.CYCLING: "bicycling",
}


def format_coordinate(point: Coordinate) -> str:
    """
    "lat,lng" using Python float repr, e.g. "40.0,-73.0" or "1e-07,0.0".

    Maps accepts these forms, so URLs can differ textually from shortest-form
    links such as "40,-73" while resolving to the same points.
    """
    return f"{point.lat},{point.lng}"


def encode_maps_url(
    origin: Coordinate,
    waypoints: Iterable[Coordinate],
    mode: Union[TravelMode, str] = TravelMode.WALKING
) -> str:
    """Directions link that starts and ends at origin and visits the waypoints in order"""
    start = format_coordinate(origin)
    waypoints_param = "|".join(format_coordinate(point) for point in waypoints)
    travel_mode = TRAVEL_MODE_PARAMS[TravelMode(mode)]

    return (
        f"{MAPS_DIR_URL}?api=1"
        f"&origin={start}"
        f"&destination={start}"
        f"&waypoints={waypoints_param}"
        f"&travelmode={travel_mode}"
    )
