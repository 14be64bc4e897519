"""
Logging configuration for the onboarding tracker.
"""

import logging
import sys

from onboarding_tracker.config.settings import settings


def setup_logging() -> None:
    """
    Configure Python logging based on settings.

    Sets up a stdout console handler on the root logger with the level
    taken from settings.log_level.
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    # Third-party noise
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured: level={settings.log_level}, store={settings.store_backend}")
