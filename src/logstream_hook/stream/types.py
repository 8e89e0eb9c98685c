"""Data types exchanged with the log-stream service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class LogStream:
    """One entry of a ``describe_log_streams`` listing.

    Attributes:
        name: Stream name within its group.
        upload_sequence_token: Token the next append must carry, or ``None``
            if the stream has never been appended to.
    """

    name: str
    upload_sequence_token: str | None = None

    @classmethod
    def from_response(cls, entry: dict[str, Any]) -> LogStream:
        """Build from one element of the ``logStreams`` response list."""
        return cls(
            name=entry["logStreamName"],
            upload_sequence_token=entry.get("uploadSequenceToken"),
        )


@dataclass(frozen=True, slots=True)
class AppendRequest:
    """A single-record append, built fresh for every write.

    Attributes:
        message: Rendered record text.
        timestamp_ms: Wall-clock time of the append (milliseconds since epoch).
        sequence_token: Token returned by the previous append, or ``None``.
    """

    message: str
    timestamp_ms: int
    sequence_token: str | None

    def to_params(self, group_name: str, stream_name: str) -> dict[str, Any]:
        """Return keyword arguments for ``put_log_events``.

        ``sequenceToken`` is omitted entirely when no token is known; the
        service rejects an explicit null.
        """
        params: dict[str, Any] = {
            "logGroupName": group_name,
            "logStreamName": stream_name,
            "logEvents": [
                {"timestamp": self.timestamp_ms, "message": self.message},
            ],
        }
        if self.sequence_token is not None:
            params["sequenceToken"] = self.sequence_token
        return params
