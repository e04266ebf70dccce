#!/usr/bin/env python3
"""
Google Sheets connectivity check
Run this to append one test row with the configured credentials
"""
import sys

from dailywalker.core.config import load_sheets_config
from dailywalker.models import LogEntry
from dailywalker.services.sheets_mirror import APPENDED, SheetsMirror


def main():
    """Append a test row to the configured spreadsheet"""
    print("Daily Walker Google Sheets Check")
    print("=" * 50)

    config = load_sheets_config()
    mirror = SheetsMirror(config)

    print("Checked credential paths:")
    for path in config.credential_paths:
        print(f"   {path}")

    key_path = mirror.find_credentials()
    print(f"Credentials: {key_path or 'not found'}")
    print(f"Spreadsheet: {config.spreadsheet_id or 'not set'} ({config.range_name})")

    entry = LogEntry(
        user_id="test_user",
        fingerprint={"test": "true"},
        start_location="Test Location",
        distance=123,
        unit="km",
        maps_url="http://test.com"
    )
    outcome = mirror.append(entry)

    print(f"\n Result: {outcome.status}")
    if outcome.detail:
        print(f"   {outcome.detail}")

    return 0 if outcome.status == APPENDED else 1


if __name__ == "__main__":
    sys.exit(main())
