"""
leaderboard.py: Leaderboard store contract, typed failures and the background dispatcher.

Store calls never run on the frame loop: ``LeaderboardClient`` hands them
to a worker thread and the game polls the outcome.
"""

import logging
import threading
from dataclasses import dataclass, replace
from typing import List, Optional, Protocol, Tuple

from .constants import LEADERBOARD_LIMIT, MAX_PLAYER_NAME_LENGTH
from .data_models import LeaderboardEntry

logger = logging.getLogger(__name__)

SUBMIT_FAILED_MESSAGE = "Failed to save score. Please try again."
FETCH_FAILED_MESSAGE = "Failed to load leaderboard"


# -------- Errors --------

class LeaderboardError(Exception):
    """Base class for leaderboard store failures."""


class SubmissionError(LeaderboardError):
    """The score could not be saved. Retrying the same call is safe."""


class FetchError(LeaderboardError):
    """The ranking could not be loaded."""


class InvalidPlayerName(ValueError):
    pass


def validate_player_name(name: str) -> str:
    """Returns the trimmed name or raises InvalidPlayerName."""
    if not name or not name.strip():
        raise InvalidPlayerName("Please enter your name")
    if len(name) > MAX_PLAYER_NAME_LENGTH:
        raise InvalidPlayerName(f"Name must be {MAX_PLAYER_NAME_LENGTH} characters or less")
    return name.strip()


def check_score(score: int, game_time: int):
    if score < 0 or game_time < 0:
        raise ValueError(f"score and game time must be non-negative, got {score}, {game_time}")


# -------- Store Contract --------

class LeaderboardStore(Protocol):
    def submit_score(self, player_name: str, score: int, game_time: int) -> LeaderboardEntry:
        """Saves one score. Raises SubmissionError."""
        ...

    def fetch_top_scores(self, limit: int = LEADERBOARD_LIMIT) -> List[LeaderboardEntry]:
        """Best scores first. Raises FetchError."""
        ...


# -------- Background Client --------

@dataclass(frozen=True)
class LeaderboardStatus:
    """What the presentation layer shows about leaderboard I/O."""
    submitting: bool = False
    submitted: Optional[LeaderboardEntry] = None
    submit_error: Optional[str] = None
    loading: bool = False
    entries: Tuple[LeaderboardEntry, ...] = ()
    fetch_error: Optional[str] = None


class LeaderboardClient:
    """Runs store calls on worker threads and exposes the latest status."""

    def __init__(self, store: LeaderboardStore):
        self.store = store
        self._status = LeaderboardStatus()
        self._status_lock = threading.Lock()
        self._threads: List[threading.Thread] = []

    def status(self) -> LeaderboardStatus:
        """Safely retrieve the latest status."""
        with self._status_lock:
            return self._status

    def submit(self, player_name: str, score: int, game_time: int) -> threading.Thread:
        """
        Validates the name on the caller's thread, then saves in the background.
        Raises InvalidPlayerName before anything is dispatched.
        """
        name = validate_player_name(player_name)
        check_score(score, game_time)
        self._update(submitting=True, submit_error=None, submitted=None)
        return self._dispatch(self._submit_worker, name, score, game_time)

    def refresh(self, limit: int = LEADERBOARD_LIMIT) -> threading.Thread:
        """Loads the ranking in the background."""
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        self._update(loading=True, fetch_error=None)
        return self._dispatch(self._fetch_worker, limit)

    def reset_submission(self):
        self._update(submitting=False, submitted=None, submit_error=None)

    def join(self, timeout: Optional[float] = None):
        """Waits for all dispatched calls (used on shutdown)."""
        for thread in list(self._threads):
            thread.join(timeout)

    def _dispatch(self, target, *args) -> threading.Thread:
        self._threads = [t for t in self._threads if t.is_alive()]
        thread = threading.Thread(target=target, args=args, daemon=True)
        self._threads.append(thread)
        thread.start()
        return thread

    def _submit_worker(self, name: str, score: int, game_time: int):
        try:
            entry = self.store.submit_score(name, score, game_time)
        except LeaderboardError as e:
            logger.error("Score submission error: %s", e)
            self._update(submitting=False, submit_error=SUBMIT_FAILED_MESSAGE)
            return
        except Exception as e:
            logger.exception(f"Unexpected score submission error: {e}")
            self._update(submitting=False, submit_error=SUBMIT_FAILED_MESSAGE)
            return
        logger.info("Saved score %d for %s", entry.score, entry.player_name)
        self._update(submitting=False, submitted=entry)

    def _fetch_worker(self, limit: int):
        try:
            entries = self.store.fetch_top_scores(limit)
        except LeaderboardError as e:
            logger.error("Leaderboard error: %s", e)
            self._update(loading=False, fetch_error=FETCH_FAILED_MESSAGE)
            return
        except Exception as e:
            logger.exception(f"Unexpected leaderboard error: {e}")
            self._update(loading=False, fetch_error=FETCH_FAILED_MESSAGE)
            return
        self._update(loading=False, entries=tuple(entries))

    def _update(self, **changes):
        with self._status_lock:
            self._status = replace(self._status, **changes)
