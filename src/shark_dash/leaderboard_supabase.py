"""
leaderboard_supabase.py: Scores stored in a hosted Supabase ``scores`` table.
"""

import logging
from datetime import datetime, timezone
from typing import List

from supabase import Client, create_client

from .constants import LEADERBOARD_LIMIT, SCORES_TABLE
from .data_models import LeaderboardEntry
from .leaderboard import FetchError, SubmissionError

logger = logging.getLogger(__name__)


class SupabaseLeaderboard:
    """Reads and writes score rows through the Supabase REST client."""

    def __init__(self, client: Client):
        self.supabase = client

    @classmethod
    def connect(cls, url: str, key: str) -> "SupabaseLeaderboard":
        return cls(create_client(url, key))

    def submit_score(self, player_name: str, score: int, game_time: int) -> LeaderboardEntry:
        """Inserts one row and returns the stored record."""
        row = {
            'player_name': player_name,
            'score': score,
            'game_time': game_time,
            'created_at': datetime.now(timezone.utc).isoformat(),
        }
        try:
            response = self.supabase.table(SCORES_TABLE)\
                .insert([row])\
                .execute()
        except Exception as e:
            logger.error("Error saving score: %s", e)
            raise SubmissionError(str(e)) from e

        if not response.data:
            raise SubmissionError("Insert returned no rows")
        try:
            return LeaderboardEntry.from_row(response.data[0])
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Malformed score row %r: %s", response.data[0], e)
            raise SubmissionError(f"Malformed score row: {e}") from e

    def fetch_top_scores(self, limit: int = LEADERBOARD_LIMIT) -> List[LeaderboardEntry]:
        """Gets the best scores, highest first."""
        try:
            response = self.supabase.table(SCORES_TABLE)\
                .select('*')\
                .order('score', desc=True)\
                .limit(limit)\
                .execute()
        except Exception as e:
            logger.error("Error fetching leaderboard: %s", e)
            raise FetchError(str(e)) from e

        try:
            return [LeaderboardEntry.from_row(row) for row in response.data or []]
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Malformed leaderboard row: %s", e)
            raise FetchError(f"Malformed leaderboard row: {e}") from e
