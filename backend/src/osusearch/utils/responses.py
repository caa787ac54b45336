"""Response envelope helpers for the proxy Lambda."""

from __future__ import annotations

import json
from typing import Any

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}


def proxy_response(body: Any) -> dict[str, Any]:
    """Wrap a shaped payload in a successful API Gateway proxy response.

    Args:
        body: JSON-compatible payload, usually the list of shaped records.

    Returns:
        API Gateway response dictionary with status 200 and an open
        CORS origin.
    """
    return {
        "statusCode": 200,
        "headers": dict(CORS_HEADERS),
        "body": json.dumps(body, default=str),
    }
