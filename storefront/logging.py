"""
Logging setup for the storefront.

    from storefront.logging import get_logger
    logger = get_logger(__name__)

Root handler is installed once, on first import. LOG_LEVEL picks the level;
on Vercel (VERCEL=1) timestamps are left to the platform.
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

# HTTP clients under supabase-py and upstash-redis log every request at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "hpack")

_CONTROL_CHARS = {"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""}


def configure_logging(level_name: str | None = None) -> None:
    """Install the stdout handler on the root logger if it has none."""
    root = logging.getLogger()
    if root.handlers:
        return

    level_name = (level_name or os.environ.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    fmt = LOG_FORMAT_SIMPLE if os.environ.get("VERCEL") == "1" else LOG_FORMAT

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    root.addHandler(handler)
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


configure_logging()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _strip_control(value: str) -> str:
    # CWE-117: client input must not start new log lines
    for char, replacement in _CONTROL_CHARS.items():
        value = value.replace(char, replacement)
    return value


def sanitize_id_for_logging(id_value: str | None) -> str:
    """
    Shorten a client-supplied id to its first 8 characters.

    Cart session ids are bearer secrets, so they are never logged whole.
    Returns "N/A" for empty values.
    """
    if not id_value:
        return "N/A"
    return _strip_control(str(id_value))[:8]


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """Escape and truncate free text (product names, emails) for log lines."""
    if not value:
        return "N/A"
    safe_value = _strip_control(str(value))
    if len(safe_value) <= max_length:
        return safe_value
    return f"{safe_value[:max_length]}..."


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "configure_logging",
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]
