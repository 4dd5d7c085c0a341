"""Models describing paginated query results and catalog totals."""

from __future__ import annotations

from typing import List

from pydantic import Field

from vidcat.models.base import VidcatBaseModel
from vidcat.models.video import Video


class PaginatedVideos(VidcatBaseModel):
    """One page of videos returned by a catalog query.

    ``total_videos`` is an estimate for plain pagination (every shard is assumed full) and the
    accumulated match count for search and filter queries, which scan a bounded prefix only.
    """

    videos: List[Video] = Field(default_factory=list)
    page: int = Field(ge=1)
    total_pages: int = Field(ge=0)
    total_videos: int = Field(ge=0)
    has_next: bool
    has_previous: bool


class CatalogStats(VidcatBaseModel):
    """Catalog-wide totals captured at engine start-up."""

    total_pages: int = Field(ge=0)
    total_videos: int = Field(ge=0)


__all__ = ["CatalogStats", "PaginatedVideos"]
