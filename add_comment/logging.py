"""Logging from config and env.

Levels (inclusive):
- ERROR: critical errors only
- WARNING: non-critical issues and ERROR
- INFO: run header, search/create/update progress, WARNING, and ERROR
- DEBUG: pagination and request details, and all levels above

Configure via config.yaml (logging.level, logging.format) or env (LOGGING_LEVEL, LOGGING_FORMAT).
"""

import logging

from add_comment import ACTION_NAME, VERSION
from add_comment.config import LoggingConfig

# Supported levels only (DEBUG, INFO, WARNING, ERROR)
LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HEADER_WIDTH = 90


def _resolve_level(level: str) -> int:
    """Map level name to logging constant.

    Falls back to INFO if unknown.
    """
    return LEVELS.get(level.upper().strip(), logging.INFO)


class ActionLogging:
    """Configures root logger from LoggingConfig (YAML + env LOGGING_*)."""

    def __init__(self, config: LoggingConfig) -> None:
        """Store logging config (level and format)."""
        self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT

    def setup(self) -> None:
        """Apply level and format to the root logger."""
        logging.basicConfig(
            level=self._level,
            format=self._format,
            force=True,
        )


def log_header(logger: logging.Logger, repository: str, issue_number: int, message_id: str) -> None:
    """Log the run banner: action, version and target."""
    line = "-" * HEADER_WIDTH
    logger.info(line)
    logger.info("%s -- Version:%s", ACTION_NAME, VERSION)
    logger.info(line)
    logger.info("Action       : %s", ACTION_NAME)
    logger.info("Repository   : %s", repository)
    logger.info("Issue/PR     : #%s", issue_number)
    if message_id:
        logger.info("Message ID   : %s", message_id)
    logger.info(line)
