"""
Logging utilities for the PayBridge UI.

Provides a logger factory that creates configured Python loggers with
consistent formatting across pages, services and payment adapters.
"""

import logging
import os
from pathlib import Path

# Default log level from environment or INFO
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def logger(name: str) -> logging.Logger:
    """
    Create and configure a logger for the given name.

    File paths (e.g. ``__file__``) are reduced to their stem so log lines
    read ``invoice - INFO - ...`` rather than carrying the full path.

    Args:
        name: Logger name or __file__ path.

    Returns:
        Configured logging.Logger instance.
    """
    if "/" in name or "\\" in name:
        name = Path(name).stem

    log = logging.getLogger(f"paybridge_ui.{name}")

    # Only configure if not already configured
    if not log.handlers:
        log.setLevel(getattr(logging, _LOG_LEVEL, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        log.addHandler(handler)
        log.propagate = False

    return log
