"""Logging setup shared by the CLI and library callers."""
import logging
import sys
from datetime import datetime, timezone

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s: %(message)s"


class _UtcFormatter(logging.Formatter):
    def formatTime(self, record, datefmt=None):
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return dt.strftime("%Y-%m-%d %H:%M:%S")


def configure_logging(verbose: bool = False) -> None:
    """Route package logs to stdout; INFO when verbose, WARNING otherwise."""
    level = logging.INFO if verbose else logging.WARNING
    logger = logging.getLogger("rgss_serializer")
    if getattr(logger, "_rgss_logging_configured", False):
        logger.setLevel(level)
        return

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(_UtcFormatter(LOG_FORMAT))
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    setattr(logger, "_rgss_logging_configured", True)
