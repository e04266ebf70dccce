"""
Loop route generation models
"""
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .common import PointModel
from .logs import FINGERPRINT_DESCRIPTION, normalize_fingerprint


class DistanceUnit(str, Enum):
    """User-facing distance units"""
    KM = "km"
    MILES = "miles"
    STEPS = "steps"


class TravelMode(str, Enum):
    """Supported travel modes"""
    WALKING = "walking"
    CYCLING = "cycling"


class LoopRouteRequest(BaseModel):
    """Request to generate a loop route"""
    start_location: str
    distance: float = Field(gt=0, allow_inf_nan=False)
    unit: DistanceUnit = DistanceUnit.KM
    height_cm: Optional[float] = None  # only used for steps
    mode: TravelMode = TravelMode.WALKING
    seed: Optional[str] = None

    # Session info; the route is logged only when user_id is present
    user_id: Optional[str] = None
    fingerprint: Optional[Dict[str, str]] = Field(default=None, description=FINGERPRINT_DESCRIPTION)

    @field_validator("fingerprint", mode="before")
    @classmethod
    def _stringify_fingerprint(cls, value):
        return normalize_fingerprint(value)


class LoopRouteResponse(BaseModel):
    """Generated loop route"""
    start_point: PointModel
    waypoints: List[PointModel]
    distance_km: float
    side_length_km: float
    straight_line_km: float
    bearing: float
    seed: str
    mode: TravelMode
    maps_url: str
    log_id: Optional[int] = None
