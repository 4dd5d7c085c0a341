"""Facet models listing sampled categories, performers, and tags."""

from __future__ import annotations

from pydantic import Field

from vidcat.models.base import VidcatBaseModel


class Category(VidcatBaseModel):
    """Category facet with an extrapolated video count.

    ``count`` is a linear extrapolation from the startup sample, not an exact corpus count.
    """

    id: str
    name: str = Field(min_length=1)
    icon: str
    count: int = Field(ge=0)


class Performer(VidcatBaseModel):
    """Performer facet with an extrapolated video count."""

    id: str
    name: str = Field(min_length=1)
    video_count: int = Field(ge=0)


class Tag(VidcatBaseModel):
    """Tag facet with an extrapolated video count."""

    id: str
    name: str = Field(min_length=1)
    count: int = Field(ge=0)


__all__ = ["Category", "Performer", "Tag"]
