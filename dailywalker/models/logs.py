"""
Route log models
"""
import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Keys sent by the web client; anything else is passed through untouched
FINGERPRINT_KEYS = (
    "userAgent",
    "language",
    "platform",
    "screen",
    "timezone",
    "browser",
    "os",
)

FINGERPRINT_DESCRIPTION = "Device attributes; known keys: " + ", ".join(FINGERPRINT_KEYS)


def normalize_fingerprint(value: Any) -> Any:
    """Coerce fingerprint values to strings, leaving the key set open"""
    if not isinstance(value, dict):
        return value
    normalized = {}
    for key, item in value.items():
        if item is None:
            continue
        if isinstance(item, str):
            normalized[str(key)] = item
        elif isinstance(item, (dict, list)):
            normalized[str(key)] = json.dumps(item)
        else:
            normalized[str(key)] = str(item)
    return normalized


class LogRequest(BaseModel):
    """Inbound log payload; required fields are checked by the router"""
    user_id: Optional[str] = None
    fingerprint: Optional[Dict[str, str]] = Field(default=None, description=FINGERPRINT_DESCRIPTION)
    start_location: Optional[str] = None
    distance: Optional[float] = None
    unit: Optional[str] = None
    maps_url: Optional[str] = None

    @field_validator("fingerprint", mode="before")
    @classmethod
    def _stringify_fingerprint(cls, value):
        return normalize_fingerprint(value)


class LogEntry(BaseModel):
    """One generated route, as handed to the logging pipeline"""
    model_config = ConfigDict(frozen=True)

    user_id: str
    fingerprint: Optional[Dict[str, str]] = None
    start_location: Optional[str] = None
    distance: Optional[float] = None
    unit: Optional[str] = None
    maps_url: str
    mode: Optional[str] = None

    def fingerprint_json(self) -> Optional[str]:
        """Serialized fingerprint, as stored in both sinks"""
        if self.fingerprint is None:
            return None
        return json.dumps(self.fingerprint)


class LogRecord(BaseModel):
    """Stored log row"""
    id: int
    user_id: Optional[str] = None
    fingerprint: Dict[str, Any]
    start_location: Optional[str] = None
    distance: Optional[float] = None
    unit: Optional[str] = None
    maps_url: Optional[str] = None
    timestamp: Optional[str] = None


class LogSavedResponse(BaseModel):
    """Response after a log was written"""
    message: str
    id: int


class LogListResponse(BaseModel):
    """All stored logs, most recent first"""
    data: List[LogRecord]


class MirrorStatusResponse(BaseModel):
    """Outcome counters of the remote spreadsheet mirror"""
    appended: int
    disabled: int
    failed: int
    last_status: Optional[str] = None
    last_error: Optional[str] = None
    last_outcome_at: Optional[str] = None
