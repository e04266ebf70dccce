import os
import tempfile

# Keep the default log database out of the working directory
os.environ.setdefault("LOGS_DB_PATH", os.path.join(tempfile.mkdtemp(), "routes.db"))
os.environ.pop("SPREADSHEET_ID", None)
os.environ.pop("GOOGLE_CREDENTIALS_PATH", None)

import pytest
from fastapi.testclient import TestClient

from dailywalker.app import app
from dailywalker.core.config import SheetsConfig
from dailywalker.core.dependencies import get_log_storage, get_logging_pipeline
from dailywalker.database.logs import LogStorage
from dailywalker.models import LogEntry
from dailywalker.services.geodesy import Coordinate
from dailywalker.services.logging_pipeline import LoggingPipeline
from dailywalker.services.sheets_mirror import SheetsMirror


@pytest.fixture
def origin():
    return Coordinate(lat=40.0, lng=-73.0)


@pytest.fixture
def fingerprint():
    return {
        "userAgent": "Mozilla/5.0 (X11; Linux x86_64) Firefox/128.0",
        "language": "en-US",
        "platform": "Linux x86_64",
        "screen": "1920x1080",
        "timezone": "America/New_York",
        "browser": "Firefox",
        "os": "UNIX",
    }


@pytest.fixture
def log_entry(fingerprint):
    return LogEntry(
        user_id="user_abc123_1700000000000",
        fingerprint=fingerprint,
        start_location="40.0, -73.0",
        distance=5,
        unit="km",
        maps_url="https://www.google.com/maps/dir/?api=1&origin=40.0,-73.0",
        mode="walking",
    )


@pytest.fixture
def storage(tmp_path):
    return LogStorage(str(tmp_path / "routes.db"))


@pytest.fixture
def no_credentials_config(tmp_path):
    return SheetsConfig(
        spreadsheet_id=None,
        credential_paths=[tmp_path / "missing" / "credentials.json"],
    )


@pytest.fixture
def pipeline(storage, no_credentials_config):
    return LoggingPipeline(storage=storage, mirror=SheetsMirror(no_credentials_config))


@pytest.fixture
def client(storage, pipeline):
    app.dependency_overrides[get_log_storage] = lambda: storage
    app.dependency_overrides[get_logging_pipeline] = lambda: pipeline
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
