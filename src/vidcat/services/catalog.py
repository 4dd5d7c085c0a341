"""Catalog engine: the public query surface over a directory of video shards."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from rich.console import Console

from vidcat.config.settings import Settings, get_settings
from vidcat.db.repositories import CorruptShardError, ShardDirectoryError
from vidcat.db.shards import ShardDirectory
from vidcat.db.video_repository import ShardReader
from vidcat.models.facet import Category, Performer, Tag
from vidcat.models.page import CatalogStats, PaginatedVideos
from vidcat.models.video import Video
from vidcat.services.sampler import MetadataSampler
from vidcat.services.search import SearchService
from vidcat.utils.identity import decode_video_id


class EngineState(str, Enum):
    """Lifecycle states of a :class:`CatalogEngine`."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"


class CatalogError(RuntimeError):
    """Base exception raised by the catalog engine."""


class CatalogInitializationError(CatalogError):
    """Raised when the shard directory cannot be enumerated at start-up."""


class EngineNotReadyError(CatalogError):
    """Raised when a query reaches an engine that has not finished initializing."""


class CatalogEngine:
    """Answer pagination, lookup, search, filter, and facet queries over sharded storage.

    Construction is the only initialization step: it counts the shard files, measures the first
    shard, and runs the metadata sampler. After that the engine holds only read-only values,
    so queries need no locking and may run concurrently. Changed shard files are picked up by
    building a new engine.

    Parameters
    ----------
    settings:
        Configuration providing the shard directory, naming convention, and query limits.
    console:
        Rich console used for log output.
    directory:
        Optional pre-built shard directory, overriding the one derived from ``settings``.

    Raises
    ------
    CatalogInitializationError
        If the shard directory cannot be listed.
    """

    def __init__(
        self,
        *,
        settings: Optional[Settings] = None,
        console: Optional[Console] = None,
        directory: Optional[ShardDirectory] = None,
    ) -> None:
        self._state = EngineState.UNINITIALIZED
        self._settings = settings or get_settings()
        self._console = console or Console()
        self._directory = directory or ShardDirectory.from_settings(self._settings)
        self._reader = ShardReader(self._directory, delimiter=self._settings.list_delimiter)

        try:
            self._total_shards = self._directory.discover()
        except ShardDirectoryError as exc:
            self._console.log(f"[red]Catalog:[/red] initialization failed: {exc}")
            raise CatalogInitializationError(str(exc)) from exc

        self._videos_per_page = self._measure_first_shard()
        self._sampler = MetadataSampler(
            self._reader,
            total_shards=self._total_shards,
            settings=self._settings,
            console=self._console,
        ).build()
        self._search = SearchService(
            self._reader,
            total_shards=self._total_shards,
            settings=self._settings,
            console=self._console,
        )

        self._state = EngineState.READY
        self._console.log(
            f"[green]Catalog:[/green] ready (shards={self._total_shards}, "
            f"videos_per_page={self._videos_per_page}, directory={self._directory.root})"
        )

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def videos_per_page(self) -> int:
        return self._videos_per_page

    # ------------------------------------------------------------------ #
    # Browsing                                                           #
    # ------------------------------------------------------------------ #
    def paginate(self, page: int) -> PaginatedVideos:
        """Return the videos of one shard, clamping ``page`` into ``[1, total_shards]``.

        ``total_videos`` assumes every shard holds ``videos_per_page`` records and is therefore
        an estimate when the last shard is shorter. A missing shard yields an empty page.
        """

        self._ensure_ready()
        total = self._total_shards
        if total == 0:
            return PaginatedVideos(
                videos=[],
                page=1,
                total_pages=0,
                total_videos=0,
                has_next=False,
                has_previous=False,
            )

        current = max(1, min(page, total))
        return PaginatedVideos(
            videos=self._reader.load_shard(current),
            page=current,
            total_pages=total,
            total_videos=self.total_videos_estimate(),
            has_next=current < total,
            has_previous=current > 1,
        )

    def get_by_id(self, video_id: str) -> Video:
        """Resolve a positional id.

        Raises :class:`~vidcat.utils.identity.InvalidVideoIdError` for malformed ids and
        :class:`~vidcat.db.repositories.VideoNotFoundError` when nothing is stored there.
        """

        location = decode_video_id(video_id)
        return self.get_video_at(location.shard_index, location.position)

    def get_video_at(self, shard_index: int, position: int) -> Video:
        self._ensure_ready()
        return self._reader.get_video_at(shard_index, position)

    # ------------------------------------------------------------------ #
    # Bounded scans                                                      #
    # ------------------------------------------------------------------ #
    def search(self, query: str, page: int = 1) -> PaginatedVideos:
        self._ensure_ready()
        return self._search.search(query, page=page)

    def filter_by_category(self, name: str, page: int = 1) -> PaginatedVideos:
        self._ensure_ready()
        return self._search.filter_by_category(name, page=page)

    def filter_by_performer(self, name: str, page: int = 1) -> PaginatedVideos:
        self._ensure_ready()
        return self._search.filter_by_performer(name, page=page)

    def filter_by_tag(self, name: str, page: int = 1) -> PaginatedVideos:
        self._ensure_ready()
        return self._search.filter_by_tag(name, page=page)

    # ------------------------------------------------------------------ #
    # Facets and totals                                                  #
    # ------------------------------------------------------------------ #
    def facet_categories(self) -> List[Category]:
        self._ensure_ready()
        return self._sampler.categories()

    def facet_performers(self) -> List[Performer]:
        self._ensure_ready()
        return self._sampler.performers()

    def facet_tags(self) -> List[Tag]:
        self._ensure_ready()
        return self._sampler.tags()

    def total_shards(self) -> int:
        return self._total_shards

    def total_videos_estimate(self) -> int:
        return self._total_shards * self._videos_per_page

    def stats(self) -> CatalogStats:
        return CatalogStats(total_pages=self._total_shards, total_videos=self.total_videos_estimate())

    # ------------------------------------------------------------------ #
    # Internal helpers                                                   #
    # ------------------------------------------------------------------ #
    def _measure_first_shard(self) -> int:
        """Record count of shard 1, used as the per-shard size for estimates."""

        if self._total_shards == 0:
            return 0
        try:
            records = self._directory.read_records(1)
        except CorruptShardError as exc:
            self._console.log(f"[yellow]Catalog:[/yellow] cannot measure shard size ({exc})")
            return 0
        return len(records) if records is not None else 0

    def _ensure_ready(self) -> None:
        if self._state is not EngineState.READY:
            raise EngineNotReadyError("Catalog engine is still initializing.")


__all__ = [
    "CatalogEngine",
    "CatalogError",
    "CatalogInitializationError",
    "EngineNotReadyError",
    "EngineState",
]
