"""Log-stream service helpers: response types and stream resolution."""

from logstream_hook.stream.resolver import find_stream, resolve_stream
from logstream_hook.stream.types import AppendRequest, LogStream

__all__ = [
    "AppendRequest",
    "LogStream",
    "find_stream",
    "resolve_stream",
]
