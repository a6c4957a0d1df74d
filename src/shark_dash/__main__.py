"""
Main entry point for Shark Dash.

Loads settings from the environment, picks the leaderboard store and
opens the game window.
"""

import logging
import sys

from dotenv import load_dotenv

from .config import get_settings, open_store


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def main() -> None:
    load_dotenv()
    settings = get_settings()
    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    store = open_store(settings)
    logger.info("Leaderboard store: %s", type(store).__name__)

    from .game_client import SharkDashClient

    try:
        SharkDashClient(store).run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
