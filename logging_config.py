"""JSON line logging on stdout."""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a JSON formatter.

    Leaves existing handlers alone, so calling ``create_app`` repeatedly
    (tests) or under a host that already configured logging is harmless.
    """
    logger = logging.getLogger()
    logger.setLevel(level.upper())
    if logger.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level"},
        )
    )
    logger.addHandler(handler)
