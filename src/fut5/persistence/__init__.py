"""SQLite-backed day-state provider: one roster and submission log per day."""

from __future__ import annotations

import json
import os
import sqlite3
import tempfile
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional

from fut5.models import Player, Submission


@dataclass
class DayRecord:
    day: str
    created_at: datetime
    updated_at: datetime
    players: List[Player]
    submissions: List[Submission]


class DayStore:
    """Simple SQLite-backed store for day rosters and submissions.

    Players and submissions are written independently; the last write to
    either column wins.
    """

    def __init__(self, db_path: Path | str):
        self._use_uri = False
        env_db = os.getenv("FUT5_DB_PATH")
        if env_db:
            if env_db.startswith("file:"):
                self.db_path = env_db
                self._use_uri = True
            else:
                self.db_path = Path(env_db)
        elif isinstance(db_path, str) and db_path.startswith("file:"):
            self.db_path = db_path
            self._use_uri = True
        else:
            self.db_path = Path(db_path)
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        if isinstance(self.db_path, Path):
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            try:
                conn = sqlite3.connect(self.db_path)
            except sqlite3.OperationalError:
                fallback_dir = Path(tempfile.gettempdir()) / "fut5-runtime"
                fallback_dir.mkdir(parents=True, exist_ok=True)
                fallback = fallback_dir / "fut5.sqlite"
                conn = sqlite3.connect(fallback)
                self.db_path = fallback
                self._create_schema(conn)
        else:
            conn = sqlite3.connect(self.db_path, uri=self._use_uri)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        with self._connect() as conn:
            self._create_schema(conn)

    def _create_schema(self, conn: sqlite3.Connection) -> None:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS days (
                day TEXT PRIMARY KEY,
                players_json TEXT NOT NULL,
                submissions_json TEXT NOT NULL,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
            """
        )
        conn.commit()

    def get_day(self, day: str) -> Optional[DayRecord]:
        with self._connect() as conn:
            row = conn.execute("SELECT * FROM days WHERE day = ?", (day,)).fetchone()
            if row is None:
                return None
            return self._row_to_record(row)

    def list_days(self, limit: int = 50) -> List[str]:
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT day FROM days ORDER BY day DESC LIMIT ?",
                (limit,),
            ).fetchall()
        return [row["day"] for row in rows]

    def save_players(self, day: str, players: Iterable[Player]) -> DayRecord:
        payload = json.dumps([player.model_dump(mode="json") for player in players])
        return self._upsert(day, column="players_json", payload=payload)

    def save_submissions(self, day: str, submissions: Iterable[Submission]) -> DayRecord:
        payload = json.dumps([submission.model_dump(mode="json") for submission in submissions])
        return self._upsert(day, column="submissions_json", payload=payload)

    def delete_day(self, day: str) -> bool:
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM days WHERE day = ?", (day,))
            conn.commit()
            return cursor.rowcount > 0

    def _upsert(self, day: str, *, column: str, payload: str) -> DayRecord:
        if column not in {"players_json", "submissions_json"}:
            raise ValueError(f"Unknown day column {column!r}")
        now = datetime.now(timezone.utc).isoformat()
        values = {"players_json": "[]", "submissions_json": "[]", column: payload}
        with self._connect() as conn:
            conn.execute(
                f"""
                INSERT INTO days (day, players_json, submissions_json, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?)
                ON CONFLICT(day) DO UPDATE SET
                    {column} = excluded.{column},
                    updated_at = excluded.updated_at
                """,
                (day, values["players_json"], values["submissions_json"], now, now),
            )
            conn.commit()
        record = self.get_day(day)
        if record is None:  # pragma: no cover
            raise KeyError(f"Day {day} not found after upsert")
        return record

    def _row_to_record(self, row: sqlite3.Row) -> DayRecord:
        return DayRecord(
            day=row["day"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
            players=[Player.model_validate(item) for item in json.loads(row["players_json"])],
            submissions=[
                Submission.model_validate(item) for item in json.loads(row["submissions_json"])
            ],
        )
