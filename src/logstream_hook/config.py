"""Configuration system for logstream-hook.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (LOGSTREAM_*) -> .env file -> field defaults.

Hooks constructed with an explicit client need no configuration at all; the
config is only consulted by :func:`build_client` and
``LogStreamHook.from_config()``.
"""

from __future__ import annotations

from typing import Any

import boto3
from botocore.config import Config
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from logstream_hook.exceptions import ConfigValidationError


class LogStreamHookConfig(BaseSettings):
    """Configuration for logstream-hook.

    Resolution order: init kwargs -> env vars (LOGSTREAM_*) -> .env file -> defaults.

    Fields are divided into two groups:
    - **Target**: which group/stream to append to and how to find it.
    - **Client**: region, credentials profile, endpoint and timeouts for the
      boto3 CloudWatch Logs client.
    """

    model_config = SettingsConfigDict(
        env_prefix="LOGSTREAM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Target ---

    group_name: str = Field(
        default="",
        description="Log group holding the target stream (must already exist)",
    )
    stream_name: str = Field(
        default="",
        description="Log stream to append to (created if missing)",
    )
    exact_stream_match: bool = Field(
        default=True,
        description="Require an exact stream-name match when resolving (False = first prefix match)",
    )

    # --- Client ---

    region_name: str | None = Field(
        default=None,
        description="AWS region (None = boto3 default resolution)",
    )
    profile_name: str | None = Field(
        default=None,
        description="AWS shared-credentials profile (None = default chain)",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Override service endpoint, e.g. a local emulator",
    )
    connect_timeout_s: float = Field(
        default=10.0,
        description="Client connect timeout in seconds",
    )
    read_timeout_s: float = Field(
        default=30.0,
        description="Client read timeout in seconds",
    )
    max_attempts: int = Field(
        default=1,
        description="Total attempts per call, including the first (1 = no retry)",
    )


def validate_config(config: LogStreamHookConfig) -> None:
    """Check that *config* describes a usable target and client.

    Args:
        config: The configuration to check.

    Raises:
        ConfigValidationError: If the group or stream name is empty, a
            timeout is not positive, or ``max_attempts`` is below 1.
    """
    if not config.group_name:
        raise ConfigValidationError("group_name must not be empty")
    if not config.stream_name:
        raise ConfigValidationError("stream_name must not be empty")
    if config.connect_timeout_s <= 0 or config.read_timeout_s <= 0:
        raise ConfigValidationError(
            f"Timeouts must be positive (connect={config.connect_timeout_s}, "
            f"read={config.read_timeout_s})"
        )
    if config.max_attempts < 1:
        raise ConfigValidationError(f"max_attempts must be >= 1, got {config.max_attempts}")


def build_client(config: LogStreamHookConfig) -> Any:
    """Create a boto3 CloudWatch Logs client from *config*.

    Retries are driven by ``max_attempts`` in botocore's ``standard`` mode;
    the default of 1 disables them.

    Args:
        config: Validated configuration.

    Returns:
        A ``logs`` client.
    """
    session = boto3.session.Session(
        profile_name=config.profile_name,
        region_name=config.region_name,
    )
    client_config = Config(
        connect_timeout=config.connect_timeout_s,
        read_timeout=config.read_timeout_s,
        retries={"max_attempts": config.max_attempts, "mode": "standard"},
    )
    return session.client("logs", endpoint_url=config.endpoint_url, config=client_config)
