"""Exception hierarchy for logstream-hook.

All exceptions raised by this package derive from LogStreamHookError.
Errors from the log-stream service itself (``botocore`` client errors) are
never wrapped: they reach the caller exactly as the client raised them.
"""


class LogStreamHookError(Exception):
    """Base exception for all logstream-hook errors."""


class ConfigValidationError(LogStreamHookError):
    """Configuration field validation failed.

    Raised before any remote call is made, e.g. when a hook is built from a
    config whose group or stream name is empty.
    """
