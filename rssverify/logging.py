"""Logging configuration for the RSS feed verifier."""

import json
import logging
import sys

from rssverify.config import get_settings


class JsonFormatter(logging.Formatter):
    """JSON formatter for production logging.

    Records logged with ``extra={"feed_path": ...}`` carry the path of the
    feed file they are about.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        base = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        feed_path = getattr(record, "feed_path", None)
        if feed_path is not None:
            base["feed_path"] = str(feed_path)
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base)


def setup_logging(level: str | None = None) -> None:
    """Configure logging based on environment.

    Log lines go to stderr so the verification report on stdout stays clean.
    """
    settings = get_settings()
    handler = logging.StreamHandler(sys.stderr)

    if settings.env == "prod":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level or settings.log_level)
