"""Hook that writes rendered records to a byte sink.

Useful for mirroring records locally or in tests: the record goes through
the same hook path (formatter, level membership) as the remote hook, but
there is no stream resolution and no token.
"""

from __future__ import annotations

import logging
from typing import IO

from logstream_hook.hooks.base import Hook


class WriterHook(Hook):
    """Passthrough hook writing to any binary file-like object.

    Each rendered record is followed by :attr:`terminator`, as with
    ``logging.StreamHandler``.

    Args:
        sink: Destination with a ``write(bytes)`` method.
        level: Handler threshold, as for any ``logging.Handler``.
    """

    terminator = "\n"

    def __init__(self, sink: IO[bytes], level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._sink = sink

    @property
    def sink(self) -> IO[bytes]:
        return self._sink

    def render(self, record: logging.LogRecord) -> str:
        return self.format(record) + self.terminator

    def write(self, data: bytes) -> int:
        """Write *data* to the sink and flush it.

        Returns:
            The count reported by the sink, or ``len(data)`` if the sink
            reports nothing.
        """
        with self.lock:
            written = self._sink.write(data)
            if hasattr(self._sink, "flush"):
                self._sink.flush()
        return len(data) if written is None else written
