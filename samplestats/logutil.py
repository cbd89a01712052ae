"""Package-wide logging.

A single ``samplestats`` logger is configured lazily. Applications embedding
the library can attach their own handlers or change the level; a stream
handler is only added when none is present. Default level is WARNING so the
numeric hot paths stay quiet.
"""
from __future__ import annotations

import logging
from typing import Optional

_LOGGER: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    global _LOGGER
    if _LOGGER is None:
        logger = logging.getLogger("samplestats")
        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("[%(name)s] %(levelname)s: %(message)s")
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
        _LOGGER = logger
    return _LOGGER


__all__ = ["get_logger"]
