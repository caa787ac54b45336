"""Client for the OSU REST API.

One authenticated GET per call; no retries, no pagination.
"""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from typing import Any
from typing import Protocol
from urllib.parse import quote
from urllib.parse import urlencode

from osusearch.exceptions import UpstreamRequestError
from osusearch.utils.logging import get_logger

logger = get_logger(__name__)


class RecordSource(Protocol):
    """Anything that can fetch upstream records for a resource."""

    def fetch(self, resource_name: str, q: str, token: str) -> list[Any]:
        ...


def encode_segment(resource_name: str) -> str:
    """Encode a resource name as exactly one path segment under the base URL.

    Slashes are escaped, and dot segments are escaped so they cannot be
    resolved against the base path.
    """
    segment = quote(resource_name, safe="")
    if segment in (".", ".."):
        segment = segment.replace(".", "%2E")
    return segment


def build_url(base_url: str, resource_name: str, q: str) -> str:
    """Build ``<base>/<resource>?q=<value>`` with both parts URL-encoded."""
    return f"{base_url}/{encode_segment(resource_name)}?{urlencode({'q': q})}"


class UpstreamClient:
    """Forwards search queries to the upstream API."""

    def __init__(self, base_url: str, timeout: int = 10):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def fetch(self, resource_name: str, q: str, token: str) -> list[Any]:
        """Fetch the ``data`` records for a resource.

        Args:
            resource_name: Upstream collection path segment.
            q: Search term, forwarded as received.
            token: Bearer token for the upstream API.

        Returns:
            The ``data`` sequence from the response body, in order.

        Raises:
            UpstreamRequestError: On network, HTTP status, or decode failure.
        """
        url = build_url(self.base_url, resource_name, q)
        req = urllib.request.Request(
            url,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/json",
            },
            method="GET",
        )

        logger.info(f"Forwarding search to {resource_name}")

        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                raw_body = resp.read()
        except urllib.error.HTTPError as exc:
            logger.warning(
                f"Upstream returned HTTP {exc.code}",
                extra={"resource": resource_name, "status": exc.code},
            )
            raise UpstreamRequestError(
                f"Upstream returned HTTP {exc.code}",
                upstream_status=exc.code,
            ) from exc
        except OSError as exc:  # URLError, socket timeouts
            logger.warning(f"Upstream request failed: {type(exc).__name__}: {exc}")
            raise UpstreamRequestError(f"Upstream request failed: {exc}") from exc

        try:
            body = json.loads(raw_body.decode("utf-8"))
            records = body["data"]
        except (ValueError, KeyError, TypeError) as exc:  # incl. UnicodeDecodeError
            logger.warning(f"Upstream body not decodable: {type(exc).__name__}")
            raise UpstreamRequestError("Upstream response is not valid JSON:API") from exc

        if not isinstance(records, list):
            raise UpstreamRequestError("Upstream data field is not a list")
        return records
