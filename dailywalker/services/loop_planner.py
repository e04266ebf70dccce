"""
Loop waypoint planning

A loop is a triangle Start -> W1 -> W2 -> Start. The first leg points along
a bearing derived from a seed string, the second turns 120 degrees so the
third leg heads back towards the start.
"""
import math
from dataclasses import dataclass
from typing import List, Tuple

from dailywalker.core.utils import get_logger
from dailywalker.services.geodesy import Coordinate, project

logger = get_logger("loop_planner")

# Roads are not straight and the maps service shortcuts a naive triangle,
# so each side is a quarter of the requested distance rather than a third.
SIDE_LENGTH_DIVISOR = 4.0

TURN_ANGLE_DEG = 120.0


@dataclass(frozen=True)
class LoopPlan:
    """Closed triangular loop: origin -> waypoints[0] -> waypoints[1] -> destination"""
    origin: Coordinate
    waypoints: Tuple[Coordinate, Coordinate]
    destination: Coordinate
    side_length_km: float
    bearing_deg: float

    @property
    def points(self) -> List[Coordinate]:
        """Vertices in traversal order, closing at the destination"""
        return [self.origin, *self.waypoints, self.destination]


def seed_hash(seed: str) -> int:
    """31-multiplier string hash over UTF-16 code units, wrapped to a signed 32-bit int"""
    encoded = str(seed).encode("utf-16-le", "surrogatepass")
    value = 0
    for i in range(0, len(encoded), 2):
        unit = encoded[i] | (encoded[i + 1] << 8)
        value = (value * 31 + unit) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def bearing_from_seed(seed: str) -> float:
    """Deterministic pseudo-random bearing in [0, 360) for a seed string"""
    x = math.sin(seed_hash(seed)) * 10000
    fraction = x - math.floor(x)
    return (fraction * 360.0) % 360.0


def plan_loop(origin: Coordinate, total_distance_km: float, seed: str) -> LoopPlan:
    """Build a triangular loop of roughly total_distance_km starting at origin"""
    if not math.isfinite(total_distance_km) or total_distance_km <= 0:
        raise ValueError(f"Total distance must be positive, got {total_distance_km}")

    side_length = total_distance_km / SIDE_LENGTH_DIVISOR
    bearing = bearing_from_seed(seed)

    first = project(origin, side_length, bearing)
    second = project(first, side_length, (bearing + TURN_ANGLE_DEG) % 360)

    logger.debug(
        f"Planned loop of {total_distance_km:.3f} km: side {side_length:.3f} km, bearing {bearing:.1f}"
    )

    return LoopPlan(
        origin=origin,
        waypoints=(first, second),
        destination=origin,
        side_length_km=side_length,
        bearing_deg=bearing,
    )
