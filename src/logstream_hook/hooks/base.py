"""Abstract base class for all hooks.

A hook is a ``logging.Handler`` invoked once per emitted record. Every hook
handles the same fixed set of levels, renders the record with its own
formatter, and hands the rendered text to ``write()``. Subclasses only
decide where the bytes go by implementing ``write()``.
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod

from logstream_hook.levels import ALL_LEVELS


class Hook(logging.Handler, ABC):
    """Abstract base for all hooks.

    ``fire()`` is the per-record entry point and lets errors propagate.
    ``emit()`` is what the stdlib ``logging`` machinery calls; it routes
    those same errors to :meth:`logging.Handler.handleError`.
    """

    def levels(self) -> tuple[int, ...]:
        """Return the levels this hook forwards, most severe first.

        The set is static and does not depend on configuration.
        """
        return ALL_LEVELS

    def render(self, record: logging.LogRecord) -> str:
        """Render *record* to the text that will be written."""
        return self.format(record)

    def fire(self, record: logging.LogRecord) -> int | None:
        """Render *record* and forward it if its level is registered.

        Args:
            record: The record emitted by the logging facility.

        Returns:
            Number of bytes written, or ``None`` if the record's level is
            not one of :meth:`levels` (the record is dropped silently).

        Raises:
            Exception: Whatever rendering or ``write()`` raised. Render
                failures are also reported on ``sys.stderr``.
        """
        try:
            line = self.render(record)
        except Exception as exc:
            sys.stderr.write(f"Unable to read entry, {exc}\n")
            raise

        if record.levelno not in self.levels():
            return None
        return self.write(line.encode("utf-8", errors="surrogateescape"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.fire(record)
        except Exception:
            self.handleError(record)

    @abstractmethod
    def write(self, data: bytes) -> int:
        """Write one rendered record.

        Args:
            data: The record text.

        Returns:
            Number of bytes accepted.
        """
