"""Tests for the find-or-create stream resolver."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock, call

import pytest
from botocore.exceptions import ClientError

from logstream_hook.stream.resolver import find_stream, resolve_stream


def _error(operation: str) -> ClientError:
    return ClientError(
        {"Error": {"Code": "ResourceNotFoundException", "Message": "group missing"}},
        operation,
    )


class TestResolveStream:
    """Fresh vs existing stream handling."""

    def test_fresh_stream_is_created_once(self, fresh_client: MagicMock) -> None:
        token = resolve_stream(fresh_client, "svc", "app-1")

        assert token is None
        fresh_client.describe_log_streams.assert_called_once_with(
            logGroupName="svc", logStreamNamePrefix="app-1"
        )
        fresh_client.create_log_stream.assert_called_once_with(
            logGroupName="svc", logStreamName="app-1"
        )

    def test_existing_stream_token_adopted(self, make_client: Any) -> None:
        client = make_client(
            streams=[{"logStreamName": "app-1", "uploadSequenceToken": "49590338"}]
        )
        token = resolve_stream(client, "svc", "app-1")

        assert token == "49590338"
        client.create_log_stream.assert_not_called()

    def test_existing_stream_never_appended(self, make_client: Any) -> None:
        client = make_client(streams=[{"logStreamName": "app-1"}])
        assert resolve_stream(client, "svc", "app-1") is None
        client.create_log_stream.assert_not_called()

    def test_describe_error_propagates(self) -> None:
        client = MagicMock()
        err = _error("DescribeLogStreams")
        client.describe_log_streams.side_effect = err

        with pytest.raises(ClientError) as excinfo:
            resolve_stream(client, "svc", "app-1")
        assert excinfo.value is err
        client.create_log_stream.assert_not_called()

    def test_create_error_propagates(self, fresh_client: MagicMock) -> None:
        err = _error("CreateLogStream")
        fresh_client.create_log_stream.side_effect = err

        with pytest.raises(ClientError) as excinfo:
            resolve_stream(fresh_client, "svc", "app-1")
        assert excinfo.value is err


class TestStreamMatching:
    """Exact-name matching (default) vs first-prefix-match."""

    def test_exact_mode_ignores_longer_names(self, make_client: Any) -> None:
        client = make_client(
            streams=[{"logStreamName": "app-10", "uploadSequenceToken": "other"}]
        )
        token = resolve_stream(client, "svc", "app-1", exact_match=True)

        assert token is None
        client.create_log_stream.assert_called_once_with(
            logGroupName="svc", logStreamName="app-1"
        )

    def test_exact_mode_picks_matching_entry(self, make_client: Any) -> None:
        client = make_client(
            streams=[
                {"logStreamName": "app-1", "uploadSequenceToken": "mine"},
                {"logStreamName": "app-10", "uploadSequenceToken": "other"},
            ]
        )
        assert resolve_stream(client, "svc", "app-1") == "mine"

    def test_prefix_mode_takes_first_result(self, make_client: Any) -> None:
        client = make_client(
            streams=[{"logStreamName": "app-10", "uploadSequenceToken": "other"}]
        )
        token = resolve_stream(client, "svc", "app-1", exact_match=False)

        assert token == "other"
        client.create_log_stream.assert_not_called()

    def test_exact_mode_follows_pagination(self) -> None:
        client = MagicMock()
        client.describe_log_streams.side_effect = [
            {"logStreams": [{"logStreamName": "app-10"}], "nextToken": "page-2"},
            {"logStreams": [{"logStreamName": "app-1", "uploadSequenceToken": "t"}]},
        ]

        assert resolve_stream(client, "svc", "app-1") == "t"
        assert client.describe_log_streams.call_args_list == [
            call(logGroupName="svc", logStreamNamePrefix="app-1"),
            call(logGroupName="svc", logStreamNamePrefix="app-1", nextToken="page-2"),
        ]
        client.create_log_stream.assert_not_called()

    def test_prefix_mode_reads_one_page(self) -> None:
        client = MagicMock()
        client.describe_log_streams.return_value = {"logStreams": [], "nextToken": "page-2"}

        assert find_stream(client, "svc", "app-1", exact_match=False) is None
        assert client.describe_log_streams.call_count == 1

    def test_find_stream_never_creates(self, fresh_client: MagicMock) -> None:
        assert find_stream(fresh_client, "svc", "app-1") is None
        fresh_client.create_log_stream.assert_not_called()
