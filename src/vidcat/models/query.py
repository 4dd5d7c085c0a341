"""Request model used by callers that route listing queries to the engine."""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator

from vidcat.models.base import VidcatBaseModel
from vidcat.utils.normalize import parse_int


class BrowseRequest(VidcatBaseModel):
    """Listing parameters as received from a caller.

    ``page`` takes the leading integer of the raw value (``"2abc" -> 2``) and falls back to 1 when
    missing, non-numeric, or below 1. Text parameters are trimmed and blank values count as absent.
    """

    page: int = Field(default=1, ge=1)
    search: Optional[str] = None
    category: Optional[str] = None
    performer: Optional[str] = None
    tag: Optional[str] = None

    @field_validator("page", mode="before")
    @classmethod
    def _coerce_page(cls, value: object) -> int:
        if value is None or isinstance(value, bool):
            return 1
        return parse_int(str(value)) or 1

    @field_validator("search", "category", "performer", "tag", mode="before")
    @classmethod
    def _blank_as_none(cls, value: object) -> object:
        if value is None:
            return None
        if isinstance(value, str):
            stripped = value.strip()
            return stripped or None
        return value


__all__ = ["BrowseRequest"]
