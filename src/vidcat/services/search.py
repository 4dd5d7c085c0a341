"""Bounded linear-scan search and facet filtering over catalog shards."""

from __future__ import annotations

from itertools import islice
from typing import Callable, Iterator, List, Optional, Sequence

from rich.console import Console

from vidcat.config.settings import ScanLimit, Settings, get_settings
from vidcat.db.repositories import CorruptShardError
from vidcat.db.video_repository import ShardReader
from vidcat.models.page import PaginatedVideos
from vidcat.models.video import Video

VideoPredicate = Callable[[Video], bool]


def _contains(values: Sequence[str], needle: str) -> bool:
    return any(needle in value.lower() for value in values)


def _equals(values: Sequence[str], needle: str) -> bool:
    return any(needle == value.lower() for value in values)


def matches_query(query: str) -> VideoPredicate:
    """Substring match against title, tags, categories, or performers (case-insensitive)."""

    needle = query.lower()

    def predicate(video: Video) -> bool:
        return (
            needle in video.title.lower()
            or _contains(video.tags, needle)
            or _contains(video.categories, needle)
            or _contains(video.actors, needle)
        )

    return predicate


def has_category(name: str) -> VideoPredicate:
    """Case-insensitive equality against any category."""

    needle = name.lower()
    return lambda video: _equals(video.categories, needle)


def has_tag(name: str) -> VideoPredicate:
    """Case-insensitive equality against any tag."""

    needle = name.lower()
    return lambda video: _equals(video.tags, needle)


def has_performer(name: str) -> VideoPredicate:
    """Case-insensitive containment within any performer name."""

    needle = name.lower()
    return lambda video: _contains(video.actors, needle)


class SearchService:
    """Answer search and filter queries by scanning a bounded prefix of shards.

    Shards are read in increasing index order starting at 1. A scan stops as soon as either its
    shard cap or its match cap is reached, so every call does bounded work and the returned
    totals describe the accumulated matches rather than the whole corpus.
    """

    def __init__(
        self,
        reader: ShardReader,
        *,
        total_shards: int,
        settings: Optional[Settings] = None,
        console: Optional[Console] = None,
    ) -> None:
        self._reader = reader
        self._total_shards = max(0, total_shards)
        self._settings = settings or get_settings()
        self._console = console or Console()

    # ------------------------------------------------------------------ #
    # Queries                                                            #
    # ------------------------------------------------------------------ #
    def search(self, query: str, *, page: int = 1) -> PaginatedVideos:
        """Free-text search over titles and facet values."""

        matches = self.collect(matches_query(query), self._settings.query_limits.search)
        return self.paginate_matches(matches, page)

    def filter_by_category(self, name: str, *, page: int = 1) -> PaginatedVideos:
        matches = self.collect(has_category(name), self._settings.query_limits.category)
        return self.paginate_matches(matches, page)

    def filter_by_performer(self, name: str, *, page: int = 1) -> PaginatedVideos:
        matches = self.collect(has_performer(name), self._settings.query_limits.performer)
        return self.paginate_matches(matches, page)

    def filter_by_tag(self, name: str, *, page: int = 1) -> PaginatedVideos:
        matches = self.collect(has_tag(name), self._settings.query_limits.tag)
        return self.paginate_matches(matches, page)

    # ------------------------------------------------------------------ #
    # Scan primitives                                                    #
    # ------------------------------------------------------------------ #
    def collect(self, predicate: VideoPredicate, limit: ScanLimit) -> List[Video]:
        """Return at most ``limit.max_matches`` matches from at most ``limit.max_shards`` shards."""

        return list(islice(self.iter_matches(predicate, limit), limit.max_matches))

    def iter_matches(self, predicate: VideoPredicate, limit: ScanLimit) -> Iterator[Video]:
        """Lazily yield matches, loading the next shard only when more matches are requested."""

        shard_count = min(limit.max_shards, self._total_shards)
        for shard_index in range(1, shard_count + 1):
            try:
                videos = self._reader.load_shard(shard_index)
            except CorruptShardError as exc:
                self._console.log(f"[yellow]Search:[/yellow] skipping shard {shard_index} ({exc})")
                continue

            for video in videos:
                if predicate(video):
                    yield video

    def paginate_matches(self, matches: Sequence[Video], page: int) -> PaginatedVideos:
        """Slice accumulated matches into a fixed-size result page."""

        per_page = self._settings.results_per_page
        page = max(1, page)
        total_pages = -(-len(matches) // per_page)
        start = (page - 1) * per_page

        return PaginatedVideos(
            videos=list(matches[start : start + per_page]),
            page=page,
            total_pages=total_pages,
            total_videos=len(matches),
            has_next=page < total_pages,
            has_previous=page > 1,
        )


__all__ = [
    "SearchService",
    "VideoPredicate",
    "has_category",
    "has_performer",
    "has_tag",
    "matches_query",
]
