"""Shared parsing utilities for request handling."""

from __future__ import annotations

from typing import Any
from typing import Mapping

from osusearch.exceptions import ValidationError


def query_params(event: Mapping[str, Any]) -> dict[str, str]:
    """Return single-value query string parameters from an API Gateway event.

    API Gateway sends ``None`` rather than an empty mapping when the
    request has no query string.
    """
    params = event.get("queryStringParameters") or {}
    return {key: value for key, value in params.items() if value is not None}


def require_param(params: Mapping[str, str], key: str) -> str:
    """Return a query parameter value as received.

    Args:
        params: Query string parameters.
        key: The parameter name to look up.

    Returns:
        The value, unmodified.

    Raises:
        ValidationError: If the parameter is absent.
    """
    value = params.get(key)
    if value is None:
        raise ValidationError(f"Missing query parameter: {key}", field=key)
    return value
