"""Lambda entrypoint for the OSU search proxy."""

from __future__ import annotations

from typing import Any
from typing import Mapping

from osusearch.api.search import lambda_handler as _handler


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Delegate to the search proxy handler."""

    return _handler(event, context)
