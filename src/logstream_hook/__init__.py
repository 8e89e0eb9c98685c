"""logstream-hook: forward Python log records to a CloudWatch Logs stream.

A ``logging.Handler`` that resolves its target stream once (find-or-create)
and then appends one record per call, chaining the sequence token returned
by each append into the next. Also ships a passthrough hook that writes the
same rendered records to any byte sink.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("logstream-hook")
except PackageNotFoundError:
    __version__ = "0.0.0"

from logstream_hook.config import LogStreamHookConfig, build_client, validate_config
from logstream_hook.exceptions import ConfigValidationError, LogStreamHookError
from logstream_hook.hooks import Hook, LogStreamHook, WriterHook
from logstream_hook.levels import ALL_LEVELS, PANIC

__all__ = [
    "ALL_LEVELS",
    "PANIC",
    "ConfigValidationError",
    "Hook",
    "LogStreamHook",
    "LogStreamHookConfig",
    "LogStreamHookError",
    "WriterHook",
    "__version__",
    "build_client",
    "validate_config",
]
