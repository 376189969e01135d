"""
Quantum Flip - Logging Configuration

Sets up the root logger from application settings.
"""

import logging

from src.config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging. ``debug`` forces DEBUG regardless of log_level."""
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    logging.getLogger(__name__).debug("Logging configured at %s", logging.getLevelName(level))
