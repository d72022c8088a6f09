"""FLAGDASH FILE PURPOSE
Purpose: logging setup with strict debug gating.
Hot path: yes (logger calls occur on every state change; default is quiet).
Feature flags: FLAGDASH_DEBUG.
Failure mode: never crash due to logging.
"""

from __future__ import annotations

import logging

from core.config import is_debug


def _configure() -> logging.Logger:
    logger = logging.getLogger("flagdash")
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    fmt = "%(asctime)s %(levelname)s %(name)s %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO if is_debug() else logging.WARNING)
    return logger


logger = _configure()
