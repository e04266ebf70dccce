"""
Google Sheets mirror - best-effort copy of each route log into a spreadsheet
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, Optional

import requests
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import AuthorizedSession
from google.oauth2 import service_account

from dailywalker.core.config import SheetsConfig
from dailywalker.core.utils import get_logger
from dailywalker.models import LogEntry

logger = get_logger("sheets_mirror")

APPENDED = "appended"
DISABLED = "disabled"
FAILED = "failed"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class MirrorOutcome:
    """Result of one mirror attempt"""
    status: str
    user_id: str
    detail: Optional[str] = None
    at: str = field(default_factory=_now_iso)


def build_row(entry: LogEntry, timestamp: Optional[str] = None) -> List[Any]:
    """[Timestamp, UserID, Fingerprint, Location, Distance, Unit, MapsURL]"""
    return [
        timestamp or _now_iso(),
        entry.user_id,
        entry.fingerprint_json() or "",
        entry.start_location or "",
        entry.distance if entry.distance is not None else "",
        entry.unit or "",
        entry.maps_url,
    ]


class SheetsMirror:
    """Appends route logs to a Google spreadsheet through the Sheets v4 API"""

    BASE_URL = "https://sheets.googleapis.com/v4/spreadsheets"

    def __init__(self, config: SheetsConfig):
        self.config = config

    def find_credentials(self) -> Optional[Path]:
        """First existing credential bundle among the configured paths"""
        for path in self.config.credential_paths:
            logger.debug(f"Checking credentials path: {path}")
            if Path(path).is_file():
                return Path(path)
        return None

    def _authorized_session(self, key_path: Path) -> AuthorizedSession:
        credentials = service_account.Credentials.from_service_account_file(
            str(key_path),
            scopes=self.config.scopes
        )
        return AuthorizedSession(credentials)

    def append(self, entry: LogEntry) -> MirrorOutcome:
        """Append one row for entry. Never raises."""
        key_path = self.find_credentials()
        if key_path is None:
            return MirrorOutcome(
                status=DISABLED,
                user_id=entry.user_id,
                detail="credentials not found in: " + ", ".join(str(p) for p in self.config.credential_paths)
            )
        if not self.config.spreadsheet_id:
            return MirrorOutcome(status=DISABLED, user_id=entry.user_id, detail="SPREADSHEET_ID not set")

        url = f"{self.BASE_URL}/{self.config.spreadsheet_id}/values/{self.config.range_name}:append"
        try:
            with self._authorized_session(key_path) as session:
                response = session.post(
                    url,
                    params={"valueInputOption": self.config.value_input_option},
                    json={"values": [build_row(entry)]},
                    timeout=self.config.timeout_seconds
                )
                response.raise_for_status()
        except requests.HTTPError as e:
            body = e.response.text if e.response is not None else ""
            return MirrorOutcome(status=FAILED, user_id=entry.user_id, detail=f"{e}: {body}".strip())
        except (GoogleAuthError, requests.RequestException, OSError, ValueError) as e:
            return MirrorOutcome(status=FAILED, user_id=entry.user_id, detail=f"{type(e).__name__}: {e}")

        return MirrorOutcome(status=APPENDED, user_id=entry.user_id, detail=str(key_path))
