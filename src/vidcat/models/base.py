"""Shared base model definitions for vidcat domain objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class VidcatBaseModel(BaseModel):
    """Base model configured for vidcat-wide defaults.

    Instances are immutable once built and serialise with camelCase aliases so the calling
    layer can emit them as-is (``model_dump(by_alias=True)``).
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


__all__ = ["VidcatBaseModel"]
