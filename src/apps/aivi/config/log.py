"""Application logging setup."""

import logging
import sys

from apps.aivi.config.config import env

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def resolve_level(level_name):
    """Map a level name such as "debug" to its number; unknown names give INFO."""
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(log_level=None):
    """Configure root logging; level defaults to AIVI_LOG_LEVEL, then INFO."""
    level_name = log_level or env.str("AIVI_LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=resolve_level(level_name),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
