"""Hook subsystem for logstream-hook.

Re-exports the ABC and both built-in hooks::

    from logstream_hook.hooks import Hook, LogStreamHook, WriterHook
"""

from logstream_hook.hooks.base import Hook
from logstream_hook.hooks.cloudwatch import LogStreamHook
from logstream_hook.hooks.writer import WriterHook

__all__ = [
    "Hook",
    "LogStreamHook",
    "WriterHook",
]
