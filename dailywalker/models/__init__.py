"""
Centralized model imports for easy access across the application
"""

# Common models
from .common import (
    PointModel,
    HealthResponse,
    ApiInfoResponse
)

# Log models
from .logs import (
    FINGERPRINT_KEYS,
    LogRequest,
    LogEntry,
    LogRecord,
    LogSavedResponse,
    LogListResponse,
    MirrorStatusResponse,
    normalize_fingerprint
)

# Route models
from .routes import (
    DistanceUnit,
    TravelMode,
    LoopRouteRequest,
    LoopRouteResponse
)

# Export all models for easy importing
__all__ = [
    # Common
    "PointModel",
    "HealthResponse",
    "ApiInfoResponse",

    # Logs
    "FINGERPRINT_KEYS",
    "LogRequest",
    "LogEntry",
    "LogRecord",
    "LogSavedResponse",
    "LogListResponse",
    "MirrorStatusResponse",
    "normalize_fingerprint",

    # Routes
    "DistanceUnit",
    "TravelMode",
    "LoopRouteRequest",
    "LoopRouteResponse",
]
