"""Hook that appends records to a CloudWatch Logs stream.

The service accepts an append only when it carries the sequence token
returned by the previous append to the same stream (no token for the first
append to a fresh stream). The hook therefore:

1. Resolves the stream once at construction (find-or-create), adopting the
   stream's current upload sequence token if it already exists.
2. Sends one record per ``put_log_events`` call with the stored token, and
   replaces the stored token with ``nextSequenceToken`` from the response.

A failed append leaves the stored token unchanged and re-raises the client
error as-is. Nothing is retried. If the failure was a token rejection the
caller may call :meth:`LogStreamHook.refresh_token` before logging again.

Appends within one hook are serialized on the handler lock, so the token
chain stays consistent when several threads log through the same instance.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from logstream_hook.config import build_client, validate_config
from logstream_hook.hooks.base import Hook
from logstream_hook.stream.resolver import resolve_stream
from logstream_hook.stream.types import AppendRequest

if TYPE_CHECKING:
    from logstream_hook.config import LogStreamHookConfig

logger = logging.getLogger("logstream_hook")


class LogStreamHook(Hook):
    """Token-chained appender for a single (group, stream) pair.

    Args:
        group_name: Log group holding the stream. Must already exist.
        stream_name: Stream to append to. Created if it does not exist.
        client: boto3 CloudWatch Logs client.
        exact_match: Resolve the stream by exact name (default) rather than
            taking the first stream whose name merely starts with
            *stream_name*.
        owns_client: Close *client* when the hook is closed.
        level: Handler threshold, as for any ``logging.Handler``.

    Raises:
        botocore.exceptions.ClientError: If the stream cannot be listed or
            created. No hook is constructed in that case.
    """

    def __init__(
        self,
        group_name: str,
        stream_name: str,
        client: Any,
        *,
        exact_match: bool = True,
        owns_client: bool = False,
        level: int = logging.NOTSET,
    ) -> None:
        super().__init__(level)
        self._client = client
        self._group_name = group_name
        self._stream_name = stream_name
        self._exact_match = exact_match
        self._owns_client = owns_client
        self._next_sequence_token: str | None = resolve_stream(
            client, group_name, stream_name, exact_match=exact_match
        )

    @classmethod
    def from_config(cls, config: LogStreamHookConfig, level: int = logging.NOTSET) -> LogStreamHook:
        """Build a hook and the client it owns from *config*.

        Raises:
            ConfigValidationError: If *config* is incomplete or invalid.
        """
        validate_config(config)
        client = build_client(config)
        try:
            return cls(
                config.group_name,
                config.stream_name,
                client,
                exact_match=config.exact_stream_match,
                owns_client=True,
                level=level,
            )
        except BaseException:
            client.close()
            raise

    @property
    def group_name(self) -> str:
        return self._group_name

    @property
    def stream_name(self) -> str:
        return self._stream_name

    @property
    def next_sequence_token(self) -> str | None:
        """Token the next append will carry (``None`` = no token)."""
        return self._next_sequence_token

    def write(self, data: bytes | str) -> int:
        """Append *data* as one record to the stream.

        Text is encoded as UTF-8, keeping surrogate-escaped characters (as
        produced by ``os.fsdecode``) as their original bytes. Bytes that are
        not valid UTF-8 are sent as ``\\xNN`` escapes, so a record is never
        dropped for its encoding.

        Args:
            data: The record text.

        Returns:
            Number of UTF-8 bytes in the record.

        Raises:
            botocore.exceptions.ClientError: If the append is rejected,
                including ``InvalidSequenceTokenException``. The stored
                token is left as it was.
        """
        raw = data if isinstance(data, bytes) else data.encode("utf-8", errors="surrogateescape")
        message = raw.decode("utf-8", errors="backslashreplace")
        with self.lock:
            request = AppendRequest(
                message=message,
                timestamp_ms=time.time_ns() // 1_000_000,
                sequence_token=self._next_sequence_token,
            )
            resp = self._client.put_log_events(
                **request.to_params(self._group_name, self._stream_name)
            )
            self._next_sequence_token = resp.get("nextSequenceToken")
        return len(raw)

    def refresh_token(self) -> str | None:
        """Re-resolve the stream and adopt the token the service reports.

        Intended for recovery after a token rejection. Never called
        automatically.

        Returns:
            The newly stored token.
        """
        with self.lock:
            self._next_sequence_token = resolve_stream(
                self._client,
                self._group_name,
                self._stream_name,
                exact_match=self._exact_match,
            )
            logger.debug(
                "Refreshed sequence token for %s/%s", self._group_name, self._stream_name
            )
            return self._next_sequence_token

    def close(self) -> None:
        """Detach the handler and close the client if this hook created it."""
        try:
            if self._owns_client:
                self._client.close()
        finally:
            super().close()

    def __repr__(self) -> str:
        level = logging.getLevelName(self.level)
        return f"<{self.__class__.__name__} {self._group_name}/{self._stream_name} ({level})>"
