"""Maps inbound API paths to upstream resources."""

from __future__ import annotations

import enum
from typing import Optional


class ResourceKind(str, enum.Enum):
    """Upstream collection a request is routed to.

    The value is the upstream path segment; ``UNKNOWN`` has none of its own.
    """

    LOCATIONS = "locations"
    DIRECTORY = "directory"
    UNKNOWN = ""


_ROUTES: dict[str, ResourceKind] = {
    "/locations": ResourceKind.LOCATIONS,
    "/people": ResourceKind.DIRECTORY,
}


def resolve_resource(path: Optional[str]) -> ResourceKind:
    """Resolve an inbound path by exact, case-sensitive match."""
    if path is None:
        return ResourceKind.UNKNOWN
    return _ROUTES.get(path, ResourceKind.UNKNOWN)


def upstream_resource_name(kind: ResourceKind, path: Optional[str]) -> str:
    """Return the upstream path segment for a resolved request.

    Unknown paths are forwarded as a literal segment, minus leading slashes.
    """
    if kind is ResourceKind.UNKNOWN:
        return (path or "").lstrip("/")
    return kind.value
