"""Shard storage access for the catalog engine."""

from __future__ import annotations

from typing import List, Optional, Protocol

from vidcat.models.video import RawVideoRecord


class ShardSource(Protocol):
    """Anything able to return the raw records held by a 1-based shard index."""

    def read_records(self, shard_index: int) -> Optional[List[RawVideoRecord]]:
        """Return the shard's records in stored order, or ``None`` when the shard is absent."""


__all__ = ["ShardSource"]
