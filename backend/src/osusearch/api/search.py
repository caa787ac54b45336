"""Lambda handler for the OSU search proxy.

Resolves the inbound path to an upstream resource, reads the bearer
token from Secrets Manager, forwards the search, and returns the
shaped records. Failures are logged and re-raised for the Lambda
runtime to report; no error body is built here.
"""

from __future__ import annotations

import time
from typing import Any
from typing import Callable
from typing import Mapping

from osusearch.api.endpoints import resolve_resource
from osusearch.api.endpoints import upstream_resource_name
from osusearch.api.shaping import shape_records
from osusearch.config import get_settings
from osusearch.services.secrets import CredentialProvider
from osusearch.services.secrets import SecretsManagerCredentialProvider
from osusearch.services.upstream import RecordSource
from osusearch.services.upstream import UpstreamClient
from osusearch.utils.logging import clear_request_context
from osusearch.utils.logging import configure_logging
from osusearch.utils.logging import get_logger
from osusearch.utils.logging import log_lambda_event
from osusearch.utils.logging import log_response
from osusearch.utils.logging import set_request_context
from osusearch.utils.parsers import query_params
from osusearch.utils.parsers import require_param
from osusearch.utils.responses import proxy_response

# Configure logging on module load
configure_logging()
logger = get_logger(__name__)

Handler = Callable[[Mapping[str, Any], Any], dict[str, Any]]


def search(
    event: Mapping[str, Any],
    credentials: CredentialProvider,
    upstream: RecordSource,
) -> list[Any]:
    """Run one search and return the shaped records."""
    path = event.get("path")
    kind = resolve_resource(path)
    q = require_param(query_params(event), "q")

    token = credentials.get_token()
    records = upstream.fetch(upstream_resource_name(kind, path), q, token)
    return shape_records(records, kind)


Collaborators = tuple[CredentialProvider, RecordSource]


def _invoke(
    event: Mapping[str, Any],
    context: Any,
    collaborators: Callable[[], Collaborators],
) -> dict[str, Any]:
    """Run one invocation inside the request's logging context."""
    request_id = (event.get("requestContext") or {}).get("requestId", "")
    set_request_context(req_id=request_id or getattr(context, "aws_request_id", None))
    start_time = time.perf_counter()
    log_lambda_event(logger, event)

    try:
        credentials, upstream = collaborators()
        results = search(event, credentials, upstream)
        log_response(
            logger,
            200,
            (time.perf_counter() - start_time) * 1000,
            count=len(results),
        )
        return proxy_response(results)
    except Exception:
        logger.exception("Search invocation failed")
        raise
    finally:
        clear_request_context()


def build_handler(
    credentials: CredentialProvider,
    upstream: RecordSource,
) -> Handler:
    """Return a Lambda handler bound to the given collaborators."""

    def handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
        return _invoke(event, context, lambda: (credentials, upstream))

    return handler


def collaborators_from_settings() -> Collaborators:
    """Build the Secrets Manager provider and upstream client from the environment."""
    settings = get_settings()
    return (
        SecretsManagerCredentialProvider(
            settings.secret_id,
            region_name=settings.secret_region,
        ),
        UpstreamClient(
            settings.upstream_base_url,
            timeout=settings.upstream_timeout_seconds,
        ),
    )


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Handle an API Gateway proxy request using environment settings."""
    return _invoke(event, context, collaborators_from_settings)
