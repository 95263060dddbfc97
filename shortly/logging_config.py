"""Logging configuration for the shortly service.

Plain mode:
    2026-10-17 12:00:00 [INFO] shortly.http - [GET] /abc123

JSON mode, one object per line:
    {"timestamp": "2026-10-17T12:00:00.000Z", "level": "INFO", "logger": "shortly.http", "message": "[GET] /abc123"}
"""

import json
import logging
import sys
from datetime import datetime, timezone


class JsonFormatter(logging.Formatter):
    """Serializes each record with json.dumps so quotes and newlines stay escaped"""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc) \
                            .isoformat(timespec="milliseconds") \
                            .replace("+00:00", "Z")

        log = {
            "timestamp": timestamp,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log)


def setup_logging(level: str = "INFO", json_format: bool = False) -> logging.Logger:
    """Setup logging for the ``shortly`` logger hierarchy.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Whether to emit one JSON object per line

    Returns:
        The configured ``shortly`` logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("shortly")
    logger.setLevel(numeric_level)

    # Calling twice (tests, reloads) must not duplicate output
    logger.handlers.clear()

    if json_format:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
