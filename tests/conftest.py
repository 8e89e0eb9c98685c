"""Shared pytest fixtures for logstream-hook tests.

Provides mocked CloudWatch Logs clients and a ready-made service error so
that hook and resolver tests never touch the network.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError


def _make_client(
    streams: list[dict[str, Any]] | None = None,
    next_tokens: list[str | None] | None = None,
) -> MagicMock:
    """Build a MagicMock client.

    Args:
        streams: ``logStreams`` returned by ``describe_log_streams``.
        next_tokens: ``nextSequenceToken`` values returned by successive
            ``put_log_events`` calls (``None`` = key absent). If omitted,
            every append returns an empty response.
    """
    client = MagicMock()
    client.describe_log_streams.return_value = {"logStreams": list(streams or [])}
    client.create_log_stream.return_value = {}
    if next_tokens is None:
        client.put_log_events.return_value = {}
    else:
        client.put_log_events.side_effect = [
            {} if token is None else {"nextSequenceToken": token} for token in next_tokens
        ]
    return client


@pytest.fixture
def make_client() -> Any:
    """Return the mocked-client factory."""
    return _make_client


@pytest.fixture
def fresh_client() -> MagicMock:
    """Return a client whose group has no streams."""
    return _make_client()


@pytest.fixture
def token_error() -> ClientError:
    """Return the error the service raises for a stale sequence token."""
    return ClientError(
        {
            "Error": {
                "Code": "InvalidSequenceTokenException",
                "Message": "The given sequenceToken is invalid.",
            },
            "expectedSequenceToken": "expected-token",
        },
        "PutLogEvents",
    )
