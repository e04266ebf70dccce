"""
Route service - turns user input into a loop route and its map link
"""
import time

from dailywalker.core.utils import get_logger
from dailywalker.models import LoopRouteRequest, LoopRouteResponse, PointModel
from dailywalker.services.geodesy import Coordinate, loop_length_km, parse_coordinate
from dailywalker.services.loop_planner import plan_loop
from dailywalker.services.maps_url import encode_maps_url
from dailywalker.services.units import to_kilometers

logger = get_logger("route_service")


def timestamp_seed() -> str:
    """Current epoch time in milliseconds, so every request gets a new loop"""
    return str(int(time.time() * 1000))


def _point(coordinate: Coordinate) -> PointModel:
    return PointModel(lat=coordinate.lat, lng=coordinate.lng)


class RouteService:
    """Service for loop route generation"""

    def generate_loop(self, request: LoopRouteRequest) -> LoopRouteResponse:
        """
        Generate a loop route.

        Raises ValueError when the start location cannot be parsed or the
        normalized distance is not positive.
        """
        origin = parse_coordinate(request.start_location)
        distance_km = to_kilometers(request.distance, request.unit, request.height_cm)
        seed = request.seed if request.seed is not None else timestamp_seed()

        plan = plan_loop(origin, distance_km, seed)
        maps_url = encode_maps_url(plan.origin, plan.waypoints, request.mode)

        logger.info(
            f"Generated {request.mode.value} loop of {distance_km:.2f} km",
            extra={"seed": seed, "origin": origin.as_tuple(), "bearing": round(plan.bearing_deg, 2)}
        )

        return LoopRouteResponse(
            start_point=_point(plan.origin),
            waypoints=[_point(point) for point in plan.waypoints],
            distance_km=distance_km,
            side_length_km=plan.side_length_km,
            straight_line_km=loop_length_km(plan.points),
            bearing=plan.bearing_deg,
            seed=seed,
            mode=request.mode,
            maps_url=maps_url,
        )
