"""
leaderboard_db.py: SQLite persistence for submitted scores.
"""

import logging
import sqlite3
import threading
from datetime import datetime, timezone
from typing import List

from .constants import DB_FILE, LEADERBOARD_LIMIT, SCORES_TABLE
from .data_models import LeaderboardEntry
from .leaderboard import FetchError, SubmissionError

logger = logging.getLogger(__name__)


class SQLiteLeaderboard:
    """Handles all interaction with the SQLite database."""

    def __init__(self, db_file: str = DB_FILE):
        # check_same_thread=False is essential: calls arrive on worker threads
        self.conn = sqlite3.connect(db_file, check_same_thread=False)
        self.conn.row_factory = sqlite3.Row
        self.lock = threading.Lock()
        self.setup()

    def setup(self):
        """Creates the scores table if it doesn't exist."""
        with self.lock:
            self.conn.execute(f"""
                CREATE TABLE IF NOT EXISTS {SCORES_TABLE} (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    player_name TEXT NOT NULL,
                    score INTEGER NOT NULL DEFAULT 0,
                    game_time INTEGER NOT NULL DEFAULT 0,
                    created_at TEXT NOT NULL
                )
            """)
            self.conn.commit()

    def submit_score(self, player_name: str, score: int, game_time: int) -> LeaderboardEntry:
        """Inserts a score row and returns it."""
        created_at = datetime.now(timezone.utc)
        try:
            with self.lock:
                cur = self.conn.execute(
                    f"INSERT INTO {SCORES_TABLE} (player_name, score, game_time, created_at) VALUES (?, ?, ?, ?)",
                    (player_name, score, game_time, created_at.isoformat()))
                self.conn.commit()
        except sqlite3.Error as e:
            logger.error("Error saving score: %s", e)
            raise SubmissionError(str(e)) from e

        return LeaderboardEntry(
            id=cur.lastrowid,
            player_name=player_name,
            score=score,
            game_time=game_time,
            created_at=created_at,
        )

    def fetch_top_scores(self, limit: int = LEADERBOARD_LIMIT) -> List[LeaderboardEntry]:
        """Fetches the top scores, best first."""
        try:
            with self.lock:
                rows = self.conn.execute(f"""
                    SELECT id, player_name, score, game_time, created_at
                    FROM {SCORES_TABLE}
                    ORDER BY score DESC, id ASC
                    LIMIT ?
                """, (limit,)).fetchall()
        except sqlite3.Error as e:
            logger.error("Error fetching leaderboard: %s", e)
            raise FetchError(str(e)) from e

        try:
            return [LeaderboardEntry.from_row(dict(row)) for row in rows]
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Malformed leaderboard row: %s", e)
            raise FetchError(f"Malformed leaderboard row: {e}") from e

    def close(self):
        with self.lock:
            self.conn.close()
