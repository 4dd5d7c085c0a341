"""Sampled frequency tables backing the category, performer, and tag facets."""

from __future__ import annotations

from collections import Counter
from typing import List, Optional, Tuple

from rich.console import Console

from vidcat.config.settings import Settings, get_settings
from vidcat.db.repositories import CorruptShardError
from vidcat.db.video_repository import ShardReader
from vidcat.models.facet import Category, Performer, Tag
from vidcat.utils.normalize import slugify


class MetadataSampler:
    """Approximate facet counts from a bounded prefix of shards.

    Only shards ``1..min(sample_shard_cap, total_shards)`` are read. Every count is extrapolated
    as ``sampled_count * ceil(total_shards / sampled_shards)``, so the numbers are estimates by
    construction and never reflect a full scan.
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
        self._settings = settings or get_settings()
        self._console = console or Console()
        self._total_shards = max(0, total_shards)
        self._sampled_shards = min(self._settings.sample_shard_cap, self._total_shards)
        self._categories: Counter[str] = Counter()
        self._performers: Counter[str] = Counter()
        self._tags: Counter[str] = Counter()
        self._skipped: List[int] = []
        self._built = False

    # ------------------------------------------------------------------ #
    # Construction                                                       #
    # ------------------------------------------------------------------ #
    def build(self) -> "MetadataSampler":
        """Read the sample shards and fill the frequency tables (runs once)."""

        if self._built:
            return self

        for shard_index in range(1, self._sampled_shards + 1):
            try:
                videos = self._reader.load_shard(shard_index)
            except CorruptShardError as exc:
                self._skipped.append(shard_index)
                self._console.log(f"[yellow]Sampler:[/yellow] skipping shard {shard_index} ({exc})")
                continue

            for video in videos:
                self._categories.update(video.categories)
                self._performers.update(video.actors)
                self._tags.update(video.tags)

        self._built = True
        self._console.log(
            f"[green]Sampler:[/green] sampled {self._sampled_shards} of {self._total_shards} shards "
            f"(categories={len(self._categories)}, performers={len(self._performers)}, "
            f"tags={len(self._tags)}, skipped={len(self._skipped)})"
        )
        return self

    # ------------------------------------------------------------------ #
    # Accessors                                                          #
    # ------------------------------------------------------------------ #
    @property
    def sampled_shards(self) -> int:
        return self._sampled_shards

    @property
    def skipped_shards(self) -> Tuple[int, ...]:
        return tuple(self._skipped)

    @property
    def multiplier(self) -> int:
        """Integer ceiling of ``total_shards / sampled_shards`` (1 when nothing was sampled)."""

        if self._sampled_shards == 0:
            return 1
        return -(-self._total_shards // self._sampled_shards)

    def categories(self) -> List[Category]:
        """Most frequent categories with extrapolated counts."""

        return [
            Category(id=slugify(name), name=name, icon=self._settings.icon_for(name), count=count)
            for name, count in self._ranked(self._categories, self._settings.category_facet_limit)
        ]

    def performers(self) -> List[Performer]:
        """Most frequent performers with extrapolated counts."""

        return [
            Performer(id=slugify(name), name=name, video_count=count)
            for name, count in self._ranked(self._performers, self._settings.performer_facet_limit)
        ]

    def tags(self) -> List[Tag]:
        """Most frequent tags with extrapolated counts."""

        return [
            Tag(id=slugify(name), name=name, count=count)
            for name, count in self._ranked(self._tags, self._settings.tag_facet_limit)
        ]

    # ------------------------------------------------------------------ #
    # Internal helpers                                                   #
    # ------------------------------------------------------------------ #
    def _ranked(self, table: Counter[str], limit: int) -> List[Tuple[str, int]]:
        """Sort by descending count, keeping first-seen order for ties, then extrapolate."""

        ranked = sorted(table.items(), key=lambda item: item[1], reverse=True)[:limit]
        multiplier = self.multiplier
        return [(name, count * multiplier) for name, count in ranked]


__all__ = ["MetadataSampler"]
