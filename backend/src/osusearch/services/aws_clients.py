"""boto3 clients for the proxy, reused across warm invocations.

Only client objects are kept; no response data is cached. Clients are
built with botocore retries disabled so each invocation performs
exactly one remote call per operation.
"""

from __future__ import annotations

from typing import Any
from typing import Optional

import boto3
import botocore.config

# One attempt in total; botocore would otherwise retry throttling and 5xx.
SINGLE_ATTEMPT_CONFIG = botocore.config.Config(
    connect_timeout=5,
    read_timeout=10,
    retries={"total_max_attempts": 1, "mode": "standard"},
)

_secretsmanager_clients: dict[Optional[str], Any] = {}


def get_secretsmanager_client(region_name: Optional[str] = None) -> Any:
    """Return the Secrets Manager client for a region, creating it once."""
    client = _secretsmanager_clients.get(region_name)
    if client is None:
        client = boto3.client(
            "secretsmanager",
            region_name=region_name,
            config=SINGLE_ATTEMPT_CONFIG,
        )
        _secretsmanager_clients[region_name] = client
    return client


def clear_client_cache() -> None:
    """Drop cached clients (used by tests)."""
    _secretsmanager_clients.clear()
