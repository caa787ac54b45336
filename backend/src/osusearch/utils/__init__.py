"""Utility modules for the search proxy."""

from osusearch.utils.logging import (
    clear_request_context,
    configure_logging,
    get_logger,
    log_lambda_event,
    log_response,
    set_request_context,
)
from osusearch.utils.parsers import query_params, require_param
from osusearch.utils.responses import proxy_response

__all__ = [
    "clear_request_context",
    "configure_logging",
    "get_logger",
    "log_lambda_event",
    "log_response",
    "proxy_response",
    "query_params",
    "require_param",
    "set_request_context",
]
