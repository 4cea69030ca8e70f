"""Process-wide logging setup."""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_INITIALIZED = False


def init_logging(log_level: str = "INFO") -> None:
    """Configure the root logger once per process."""
    global _INITIALIZED
    if _INITIALIZED:
        return

    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    _INITIALIZED = True
