"""SQLite-backed usage log storage."""

from __future__ import annotations

import sqlite3
from datetime import datetime
from pathlib import Path

from resume_maker.logging.models import UsageLog

DEFAULT_DB_PATH = Path.home() / ".resume-maker" / "usage.db"


class UsageStore:
    """SQLite-backed store for generation usage logs with WAL mode."""

    def __init__(self, db_path: str | Path = DEFAULT_DB_PATH):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path))
        conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS usage_logs (
                    id TEXT PRIMARY KEY,
                    timestamp TEXT NOT NULL,
                    template_type TEXT NOT NULL,
                    model TEXT NOT NULL,
                    source TEXT NOT NULL,
                    attempts INTEGER NOT NULL DEFAULT 0,
                    elapsed_seconds REAL NOT NULL DEFAULT 0.0,
                    success INTEGER NOT NULL DEFAULT 1,
                    error_message TEXT
                )
            """)

    def save_log(self, log: UsageLog) -> None:
        """Persist a usage log entry."""
        with self._connect() as conn:
            conn.execute(
                """INSERT OR REPLACE INTO usage_logs
                   (id, timestamp, template_type, model, source, attempts,
                    elapsed_seconds, success, error_message)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)""",
                (
                    log.id,
                    log.timestamp.isoformat(),
                    log.template_type,
                    log.model,
                    log.source,
                    log.attempts,
                    log.elapsed_seconds,
                    1 if log.success else 0,
                    log.error_message,
                ),
            )

    def get_logs(
        self,
        source: str | None = None,
        limit: int = 50,
    ) -> list[UsageLog]:
        """Retrieve usage logs, newest first, optionally filtered by source."""
        with self._connect() as conn:
            if source is not None:
                rows = conn.execute(
                    "SELECT * FROM usage_logs WHERE source = ? ORDER BY timestamp DESC LIMIT ?",
                    (source, limit),
                ).fetchall()
            else:
                rows = conn.execute(
                    "SELECT * FROM usage_logs ORDER BY timestamp DESC LIMIT ?",
                    (limit,),
                ).fetchall()
        return [self._row_to_log(row) for row in rows]

    def get_monthly_stats(self) -> dict:
        """Get aggregated stats for the current month."""
        now = datetime.now()
        month_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        with self._connect() as conn:
            row = conn.execute(
                """SELECT
                       COUNT(*) as total_runs,
                       SUM(CASE WHEN source = 'fallback' THEN 1 ELSE 0 END) as fallback_count,
                       SUM(CASE WHEN source = 'mock' THEN 1 ELSE 0 END) as mock_count,
                       AVG(attempts) as avg_attempts,
                       AVG(elapsed_seconds) as avg_elapsed
                   FROM usage_logs
                   WHERE timestamp >= ?""",
                (month_start.isoformat(),),
            ).fetchone()
        return {
            "total_runs": row[0] or 0,
            "fallback_count": row[1] or 0,
            "mock_count": row[2] or 0,
            "fallback_rate": (row[1] / row[0] * 100) if row[0] else 0.0,
            "avg_attempts": round(row[3], 2) if row[3] is not None else None,
            "avg_elapsed_seconds": round(row[4], 2) if row[4] is not None else None,
            "month": now.strftime("%Y-%m"),
        }

    @staticmethod
    def _row_to_log(row: tuple) -> UsageLog:
        return UsageLog(
            id=row[0],
            timestamp=datetime.fromisoformat(row[1]),
            template_type=row[2],
            model=row[3],
            source=row[4],
            attempts=row[5],
            elapsed_seconds=row[6],
            success=bool(row[7]),
            error_message=row[8],
        )
