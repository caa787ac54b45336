"""Runtime settings for the search proxy.

Values come from the Lambda environment and fall back to the
deployment defaults for the OSU search stack.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from osusearch.exceptions import ConfigurationError

DEFAULT_SECRET_REGION = "us-west-2"
DEFAULT_SECRET_ID = "osusearch/apigeeToken"
DEFAULT_UPSTREAM_BASE_URL = "https://api.oregonstate.edu/v1"
DEFAULT_UPSTREAM_TIMEOUT_SECONDS = 10


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for one process."""

    secret_region: str
    secret_id: str
    upstream_base_url: str
    upstream_timeout_seconds: int


def _parse_timeout(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError("UPSTREAM_TIMEOUT_SECONDS") from exc
    if value <= 0:
        raise ConfigurationError("UPSTREAM_TIMEOUT_SECONDS")
    return value


def get_settings() -> Settings:
    """Read settings from the environment.

    Returns:
        Settings with defaults applied for unset variables.

    Raises:
        ConfigurationError: If a value is set but unusable.
    """
    base_url = os.getenv("UPSTREAM_BASE_URL") or DEFAULT_UPSTREAM_BASE_URL
    timeout_raw = os.getenv("UPSTREAM_TIMEOUT_SECONDS", "")

    return Settings(
        secret_region=os.getenv("SECRET_REGION") or DEFAULT_SECRET_REGION,
        secret_id=os.getenv("SECRET_ID") or DEFAULT_SECRET_ID,
        upstream_base_url=base_url.rstrip("/"),
        upstream_timeout_seconds=(
            _parse_timeout(timeout_raw)
            if timeout_raw
            else DEFAULT_UPSTREAM_TIMEOUT_SECONDS
        ),
    )
