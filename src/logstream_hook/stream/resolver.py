"""Find-or-create resolution of the target log stream.

Runs once when a hook is constructed. If the stream already exists its
current upload sequence token is recovered; otherwise the stream is created
and no token is needed for the first append.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from logstream_hook.stream.types import LogStream

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger("logstream_hook")


def _iter_streams(
    client: Any,
    group_name: str,
    prefix: str,
    *,
    all_pages: bool,
) -> Iterator[LogStream]:
    """Yield streams in *group_name* whose names start with *prefix*.

    Only the first page is fetched unless *all_pages* is set, in which case
    ``nextToken`` is followed until the listing is exhausted.
    """
    params: dict[str, Any] = {
        "logGroupName": group_name,
        "logStreamNamePrefix": prefix,
    }
    while True:
        resp = client.describe_log_streams(**params)
        for entry in resp.get("logStreams", []):
            yield LogStream.from_response(entry)
        next_token = resp.get("nextToken")
        if not all_pages or not next_token:
            return
        params["nextToken"] = next_token


def find_stream(
    client: Any,
    group_name: str,
    stream_name: str,
    *,
    exact_match: bool = True,
) -> LogStream | None:
    """Look up the target stream without creating it.

    Args:
        client: boto3 CloudWatch Logs client.
        group_name: Log group to search.
        stream_name: Stream name (also used as the listing prefix).
        exact_match: Require ``name == stream_name``. When ``False`` the
            first prefix match is taken, even if its name is longer.

    Returns:
        The matching stream, or ``None`` if there is none.
    """
    streams = _iter_streams(client, group_name, stream_name, all_pages=exact_match)
    for stream in streams:
        if not exact_match or stream.name == stream_name:
            return stream
    return None


def resolve_stream(
    client: Any,
    group_name: str,
    stream_name: str,
    *,
    exact_match: bool = True,
) -> str | None:
    """Find or create the target stream and return its initial token.

    Args:
        client: boto3 CloudWatch Logs client.
        group_name: Log group holding the stream. Must already exist.
        stream_name: Stream to append to.
        exact_match: See :func:`find_stream`.

    Returns:
        The upload sequence token of an existing stream (``None`` if it was
        never appended to), or ``None`` for a freshly created stream.

    Raises:
        botocore.exceptions.ClientError: If the listing or the creation call
            fails. The error is not wrapped.
    """
    stream = find_stream(client, group_name, stream_name, exact_match=exact_match)
    if stream is not None:
        logger.debug(
            "Adopted existing log stream %s/%s (token=%s)",
            group_name,
            stream.name,
            stream.upload_sequence_token,
        )
        return stream.upload_sequence_token

    client.create_log_stream(logGroupName=group_name, logStreamName=stream_name)
    logger.info("Created log stream %s/%s", group_name, stream_name)
    return None
