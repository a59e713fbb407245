"""
Logging setup for the resolver and its CLI.

Production gets one JSON object per line on stdout; everything else gets
plain text. Library code only ever calls logging.getLogger(__name__).
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import json_log_formatter

from wandermint_geo.config import get_settings

TEXT_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s"
TEXT_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Per-request chatter from the HTTP stack drowns out resolver decisions
_QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: Optional[str] = None, json_logs: Optional[bool] = None) -> None:
    """
    Install a single stdout handler on the root logger.

    `level` and `json_logs` override LOG_LEVEL and APP_ENV=production.
    Calling it again replaces the handler instead of stacking a second one.
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    if json_logs is None:
        json_logs = settings.env == "production"

    handler = logging.StreamHandler(sys.stdout)
    if json_logs:
        handler.setFormatter(json_log_formatter.JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt=TEXT_DATEFMT))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers = [handler]

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
