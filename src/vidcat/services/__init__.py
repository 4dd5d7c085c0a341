"""Service layer for the vidcat catalog engine."""

from typing import Protocol

from vidcat.models.page import PaginatedVideos


class ListingQueries(Protocol):
    """Listing operations a request router can dispatch to."""

    def paginate(self, page: int) -> PaginatedVideos:
        """Return one page of the unfiltered catalog."""

    def search(self, query: str, page: int = 1) -> PaginatedVideos:
        """Return one page of free-text search results."""

    def filter_by_category(self, name: str, page: int = 1) -> PaginatedVideos:
        """Return one page of videos in a category."""

    def filter_by_performer(self, name: str, page: int = 1) -> PaginatedVideos:
        """Return one page of videos featuring a performer."""

    def filter_by_tag(self, name: str, page: int = 1) -> PaginatedVideos:
        """Return one page of videos carrying a tag."""


__all__ = ["ListingQueries"]
