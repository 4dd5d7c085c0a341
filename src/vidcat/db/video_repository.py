"""Read path turning shard records into normalized videos."""

from __future__ import annotations

from typing import List

from vidcat.db import ShardSource
from vidcat.db.repositories import VideoNotFoundError
from vidcat.models.video import Video
from vidcat.utils.normalize import DEFAULT_DELIMITER, normalize_record


class ShardReader:
    """Load and normalize shards on demand.

    Nothing is cached: each call re-reads its shard from the source, so memory stays bounded by
    a single shard and concurrent readers share no mutable state.
    """

    def __init__(self, source: ShardSource, *, delimiter: str = DEFAULT_DELIMITER) -> None:
        self._source = source
        self._delimiter = delimiter

    def load_shard(self, shard_index: int) -> List[Video]:
        """Return the normalized videos of a shard, or ``[]`` if the shard is missing.

        Raises :class:`~vidcat.db.repositories.CorruptShardError` for unparseable shards.
        """

        records = self._source.read_records(shard_index)
        if records is None:
            return []
        return [
            normalize_record(record, shard_index, position, delimiter=self._delimiter)
            for position, record in enumerate(records)
        ]

    def get_video_at(self, shard_index: int, position: int) -> Video:
        """Return the video stored at ``position`` of ``shard_index``."""

        videos = self.load_shard(shard_index)
        if position < 0 or position >= len(videos):
            raise VideoNotFoundError(shard_index, position)
        return videos[position]


__all__ = ["ShardReader"]
