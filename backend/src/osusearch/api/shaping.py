"""Reshape upstream JSON:API records into the public schema."""

from __future__ import annotations

from typing import Any
from typing import Callable
from typing import Mapping
from typing import Sequence

from osusearch.api.endpoints import ResourceKind
from osusearch.api.schemas import LocationSchema
from osusearch.api.schemas import PersonSchema


def _attributes(record: Mapping[str, Any]) -> Mapping[str, Any]:
    return record.get("attributes") or {}


def shape_location(record: Mapping[str, Any]) -> dict[str, Any]:
    attributes = _attributes(record)
    thumbnails = attributes.get("thumbnails") or []
    return LocationSchema(
        id=record.get("id"),
        name=attributes.get("name"),
        image=thumbnails[0] if thumbnails else None,
        link=attributes.get("website"),
    ).model_dump(by_alias=True)


def shape_person(record: Mapping[str, Any]) -> dict[str, Any]:
    attributes = _attributes(record)
    return PersonSchema(
        id=record.get("id"),
        firstName=attributes.get("firstName"),
        lastName=attributes.get("lastName"),
        department=attributes.get("department"),
    ).model_dump(by_alias=True)


_SHAPERS: dict[ResourceKind, Callable[[Mapping[str, Any]], Any]] = {
    ResourceKind.LOCATIONS: shape_location,
    ResourceKind.DIRECTORY: shape_person,
}


def shape_records(records: Sequence[Any], kind: ResourceKind) -> list[Any]:
    """Apply the shaper for ``kind`` to every record, preserving order.

    Records for an unknown kind are returned as-is.
    """
    shaper = _SHAPERS.get(kind)
    if shaper is None:
        return list(records)
    return [shaper(record) for record in records]
