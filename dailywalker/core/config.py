"""
Application configuration and constants
"""
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

PACKAGE_DIR = Path(__file__).parent.parent
PROJECT_ROOT = PACKAGE_DIR.parent

# Static files directory (built frontend bundle)
STATIC_DIR = PACKAGE_DIR / "static"
STATIC_DIR.mkdir(exist_ok=True)

# Database configuration
DATABASE_CONFIG = {
    "logs_db_path": os.getenv("LOGS_DB_PATH", "routes.db"),
}

# API configuration
API_CONFIG = {
    "title": "Daily Walker API",
    "version": "1.0.0",
    "description": "API for generating loop walking and cycling routes"
}

SERVER_CONFIG = {
    "host": os.getenv("HOST", "0.0.0.0"),
    "port": int(os.getenv("PORT", "3000")),
}

# Candidate locations for the Google service account key, checked in order
DEFAULT_CREDENTIAL_PATHS = [
    PACKAGE_DIR / "credentials.json",         # Local checkout
    PROJECT_ROOT / "credentials.json",        # Docker root
    Path("/etc/secrets/credentials.json"),    # Render secret files
]

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


class SheetsConfig(BaseModel):
    """Remote spreadsheet mirror configuration"""
    spreadsheet_id: Optional[str] = None
    credential_paths: List[Path] = Field(default_factory=lambda: list(DEFAULT_CREDENTIAL_PATHS))
    range_name: str = "Sheet1!A:G"
    value_input_option: str = "USER_ENTERED"
    scopes: List[str] = Field(default_factory=lambda: list(SHEETS_SCOPES))
    timeout_seconds: float = Field(default=10.0, gt=0)


def load_sheets_config() -> SheetsConfig:
    """Build the mirror configuration from the environment"""
    credential_paths = list(DEFAULT_CREDENTIAL_PATHS)
    explicit_path = os.getenv("GOOGLE_CREDENTIALS_PATH")
    if explicit_path:
        credential_paths.insert(0, Path(explicit_path))

    return SheetsConfig(
        spreadsheet_id=os.getenv("SPREADSHEET_ID") or None,
        credential_paths=credential_paths,
        range_name=os.getenv("SHEETS_RANGE", "Sheet1!A:G"),
    )
