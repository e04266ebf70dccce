"""
Distance unit conversion to kilometers
"""
import math
from typing import Optional, Union

from dailywalker.models import DistanceUnit

KM_PER_MILE = 1.60934

# Average stride length is about 41.5% of body height
STRIDE_TO_HEIGHT_RATIO = 0.415
DEFAULT_HEIGHT_CM = 170.0
MIN_HEIGHT_CM = 50.0

CM_PER_KM = 100000.0


def stride_length_km(height_cm: Optional[float]) -> float:
    """Stride length for a body height, falling back to the default height"""
    if height_cm is None or not math.isfinite(height_cm) or height_cm < MIN_HEIGHT_CM:
        height_cm = DEFAULT_HEIGHT_CM
    return height_cm * STRIDE_TO_HEIGHT_RATIO / CM_PER_KM


def to_kilometers(
    value: float,
    unit: Union[DistanceUnit, str],
    height_cm: Optional[float] = None
) -> float:
    """Convert a user-facing distance to kilometers"""
    unit = DistanceUnit(unit)
    if unit is DistanceUnit.KM:
        return value
    if unit is DistanceUnit.MILES:
        return value * KM_PER_MILE
    return value * stride_length_km(height_cm)
