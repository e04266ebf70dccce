"""
Route logging pipeline - local SQLite write plus best-effort spreadsheet mirror

The two sinks are independent. The local write runs in the request and its
errors propagate; the mirror is scheduled by the router as a background task
and its outcome only reaches the recorder.
"""
import threading
from typing import Dict, Optional

from dailywalker.core.utils import get_logger
from dailywalker.database.logs import LogStorage
from dailywalker.models import LogEntry
from dailywalker.services.sheets_mirror import APPENDED, DISABLED, FAILED, MirrorOutcome, SheetsMirror

logger = get_logger("logging_pipeline")


class MirrorOutcomeRecorder:
    """Logs mirror outcomes and keeps running counters"""

    def __init__(self):
        self._lock = threading.Lock()
        self._counts: Dict[str, int] = {APPENDED: 0, DISABLED: 0, FAILED: 0}
        self._last: Optional[MirrorOutcome] = None
        self._last_error: Optional[str] = None

    def record(self, outcome: MirrorOutcome) -> None:
        with self._lock:
            self._counts[outcome.status] = self._counts.get(outcome.status, 0) + 1
            self._last = outcome
            if outcome.status == FAILED:
                self._last_error = outcome.detail

        if outcome.status == APPENDED:
            logger.info(f"Mirrored log for {outcome.user_id} to Google Sheets")
        elif outcome.status == DISABLED:
            logger.info(f"Google Sheets mirror disabled: {outcome.detail}")
        else:
            logger.error(f"Google Sheets mirror failed for {outcome.user_id}: {outcome.detail}")

    def snapshot(self) -> Dict[str, Optional[object]]:
        with self._lock:
            return {
                "appended": self._counts.get(APPENDED, 0),
                "disabled": self._counts.get(DISABLED, 0),
                "failed": self._counts.get(FAILED, 0),
                "last_status": self._last.status if self._last else None,
                "last_error": self._last_error,
                "last_outcome_at": self._last.at if self._last else None,
            }


class LoggingPipeline:
    """Records each generated route in both sinks"""

    def __init__(
        self,
        storage: LogStorage,
        mirror: SheetsMirror,
        recorder: Optional[MirrorOutcomeRecorder] = None
    ):
        self.storage = storage
        self.mirror = mirror
        self.recorder = recorder or MirrorOutcomeRecorder()

    def log_route(self, entry: LogEntry) -> int:
        """Write the local row and return its id. Store errors propagate."""
        log_id = self.storage.insert_log(entry)
        logger.info(
            f"Route log {log_id} saved for {entry.user_id}",
            extra={"log_id": log_id, "unit": entry.unit, "mode": entry.mode}
        )
        return log_id

    def mirror_entry(self, entry: LogEntry) -> MirrorOutcome:
        """Background task: append entry to the spreadsheet. Never raises."""
        try:
            outcome = self.mirror.append(entry)
        except Exception as e:
            logger.error(f"Unexpected mirror error: {e}", exc_info=True)
            outcome = MirrorOutcome(status=FAILED, user_id=entry.user_id, detail=str(e))
        self.recorder.record(outcome)
        return outcome
