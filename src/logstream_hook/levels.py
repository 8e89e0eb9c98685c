"""Severity levels handled by every hook.

The stdlib ``logging`` module tops out at ``CRITICAL``. Hooks additionally
recognize ``PANIC``, one step above it, so that the six conventional levels
(panic, fatal, error, warning, info, debug) are all representable.
"""

from __future__ import annotations

import logging

PANIC: int = 60
FATAL: int = logging.CRITICAL
ERROR: int = logging.ERROR
WARNING: int = logging.WARNING
INFO: int = logging.INFO
DEBUG: int = logging.DEBUG

logging.addLevelName(PANIC, "PANIC")

# Most to least severe.
ALL_LEVELS: tuple[int, ...] = (PANIC, FATAL, ERROR, WARNING, INFO, DEBUG)
