"""Pydantic schemas for public search records.

Upstream records are opaque, so field values are copied as-is and
never validated or coerced.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class LocationSchema(BaseModel):
    """Campus location."""

    id: Any = None
    name: Any = None
    image: Any = None
    link: Any = None


class PersonSchema(BaseModel):
    """Directory entry."""

    model_config = ConfigDict(populate_by_name=True)

    id: Any = None
    first_name: Any = Field(default=None, alias="firstName")
    last_name: Any = Field(default=None, alias="lastName")
    department: Any = None
