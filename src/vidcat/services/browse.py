"""Route a listing request to exactly one catalog query."""

from __future__ import annotations

from vidcat.models.page import PaginatedVideos
from vidcat.models.query import BrowseRequest
from vidcat.services import ListingQueries


def dispatch_browse(engine: ListingQueries, request: BrowseRequest) -> PaginatedVideos:
    """Run the query selected by ``request``.

    When several parameters are present the first one wins, in this order: search, category,
    performer, tag. With none present the plain catalog page is returned.
    """

    if request.search:
        return engine.search(request.search, page=request.page)
    if request.category:
        return engine.filter_by_category(request.category, page=request.page)
    if request.performer:
        return engine.filter_by_performer(request.performer, page=request.page)
    if request.tag:
        return engine.filter_by_tag(request.tag, page=request.page)
    return engine.paginate(request.page)


__all__ = ["dispatch_browse"]
