"""Pydantic models describing raw shard records and normalized videos."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vidcat.models.base import VidcatBaseModel


class RawVideoRecord(BaseModel):
    """One entry of a shard file, exactly as stored.

    Every field is semi-structured text. Lists are delimiter-joined and numbers are digits in
    strings; :func:`vidcat.utils.normalize.normalize_record` turns a record into a :class:`Video`.
    The record carries no id: its position inside the shard is its identity.
    """

    embed: str = ""
    thumbnail: str = ""
    thumbnail2: Optional[str] = None
    screenshots: str = ""
    screenshots2: Optional[str] = None
    title: str = ""
    tags: str = ""
    categories: str = ""
    actors: str = ""
    duration: str = ""
    views: str = ""
    likes: str = ""
    dislikes: str = ""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_text(cls, value: object) -> object:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator(
        "embed",
        "thumbnail",
        "screenshots",
        "title",
        "tags",
        "categories",
        "actors",
        "duration",
        "views",
        "likes",
        "dislikes",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return "" if value is None else value


class Video(VidcatBaseModel):
    """Normalized video entity returned by every catalog query.

    ``id`` is ``"{shard_index}-{position}"``; see :mod:`vidcat.utils.identity`.
    """

    id: str = Field(min_length=3)
    title: str
    thumbnail_url: str = ""
    thumbnail2_url: Optional[str] = None
    embed_code: str = ""
    embed_url: str = ""
    duration: str
    duration_seconds: int = Field(ge=0)
    views: str
    views_count: int = Field(ge=0)
    likes: int = Field(default=0, ge=0)
    dislikes: int = Field(default=0, ge=0)
    category: str
    categories: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    actors: List[str] = Field(default_factory=list)
    screenshots: List[str] = Field(default_factory=list)


__all__ = ["RawVideoRecord", "Video"]
