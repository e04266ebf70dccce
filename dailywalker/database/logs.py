"""
Route log storage using SQLite (append-only)
"""
import json
import sqlite3
import threading
from contextlib import contextmanager
from typing import Any, Dict, List

from dailywalker.models import LogEntry


class LogStorage:
    """Persistent, append-only route log storage using SQLite"""

    def __init__(self, db_path: str = "routes.db"):
        self.db_path = db_path
        self._local = threading.local()
        self._init_db()

    def _get_connection(self):
        """Get thread-local database connection"""
        if not hasattr(self._local, 'connection'):
            self._local.connection = sqlite3.connect(
                self.db_path,
                check_same_thread=False,
                timeout=30.0
            )
            self._local.connection.row_factory = sqlite3.Row
        return self._local.connection

    @contextmanager
    def _get_cursor(self):
        """Context manager for database operations"""
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            yield cursor
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()

    def _init_db(self):
        """Initialize the database schema"""
        with self._get_cursor() as cursor:
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS logs (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id TEXT,
                    fingerprint TEXT,
                    start_location TEXT,
                    distance REAL,
                    unit TEXT,
                    maps_url TEXT,
                    timestamp DATETIME DEFAULT CURRENT_TIMESTAMP
                )
            """)

            cursor.execute("""
                CREATE INDEX IF NOT EXISTS idx_logs_timestamp
                ON logs(timestamp)
            """)

    def insert_log(self, entry: LogEntry) -> int:
        """Append a log entry and return its row id"""
        with self._get_cursor() as cursor:
            cursor.execute("""
                INSERT INTO logs (user_id, fingerprint, start_location, distance, unit, maps_url)
                VALUES (?, ?, ?, ?, ?, ?)
            """, (
                entry.user_id,
                entry.fingerprint_json(),
                entry.start_location,
                entry.distance,
                entry.unit,
                entry.maps_url
            ))
            return cursor.lastrowid

    def get_logs(self) -> List[Dict[str, Any]]:
        """Get all logs, most recent first, with the fingerprint parsed"""
        with self._get_cursor() as cursor:
            cursor.execute("""
                SELECT id, user_id, fingerprint, start_location, distance, unit, maps_url, timestamp
                FROM logs ORDER BY timestamp DESC, id DESC
            """)
            return [
                {
                    "id": row['id'],
                    "user_id": row['user_id'],
                    "fingerprint": json.loads(row['fingerprint'] or '{}'),
                    "start_location": row['start_location'],
                    "distance": row['distance'],
                    "unit": row['unit'],
                    "maps_url": row['maps_url'],
                    "timestamp": row['timestamp']
                }
                for row in cursor.fetchall()
            ]

    def count_logs(self) -> int:
        """Number of stored logs"""
        with self._get_cursor() as cursor:
            cursor.execute("SELECT COUNT(*) AS count FROM logs")
            return cursor.fetchone()['count']
