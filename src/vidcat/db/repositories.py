"""Exceptions raised by the shard storage layer."""

from __future__ import annotations

from typing import Optional


class RepositoryError(RuntimeError):
    """Base exception raised for storage layer failures."""


class RecordNotFoundError(RepositoryError):
    """Raised when a requested record cannot be located."""


class VideoNotFoundError(RecordNotFoundError):
    """Raised when a well-formed location does not resolve to a stored video."""

    def __init__(self, shard_index: int, position: int) -> None:
        super().__init__(f"No video at position {position} of shard {shard_index}.")
        self.shard_index = shard_index
        self.position = position


class CorruptShardError(RepositoryError):
    """Raised when a shard file exists but its content cannot be parsed."""

    def __init__(self, shard_index: int, reason: Optional[str] = None) -> None:
        message = f"Shard {shard_index} is corrupt"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.shard_index = shard_index


class ShardDirectoryError(RepositoryError):
    """Raised when the shard directory cannot be listed."""


__all__ = [
    "CorruptShardError",
    "RecordNotFoundError",
    "RepositoryError",
    "ShardDirectoryError",
    "VideoNotFoundError",
]
