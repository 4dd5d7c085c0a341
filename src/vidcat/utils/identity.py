"""Positional video identifiers: ``"{shard_index}-{position}"``.

An id is derived from where a record lives, never stored. Decoding an id therefore locates the
record in O(1) without an index file, at the cost of ids changing if the corpus is re-sharded.
"""

from __future__ import annotations

import re
from typing import NamedTuple

ID_SEPARATOR = "-"

_PART_PATTERN = re.compile(r"[0-9]+")


class InvalidVideoIdError(ValueError):
    """Raised when a string is not a well-formed positional video id."""


class VideoLocation(NamedTuple):
    """Shard index (1-based) and zero-based position of a record inside that shard."""

    shard_index: int
    position: int


def encode_video_id(shard_index: int, position: int) -> str:
    """Return the opaque id for the record at ``position`` in shard ``shard_index``."""

    return f"{shard_index}{ID_SEPARATOR}{position}"


def decode_video_id(video_id: str) -> VideoLocation:
    """Recover the shard index and position encoded in ``video_id``."""

    parts = video_id.split(ID_SEPARATOR)
    if len(parts) != 2:
        raise InvalidVideoIdError(f"Invalid video id: {video_id!r}")

    shard_part, position_part = parts
    if not _PART_PATTERN.fullmatch(shard_part) or not _PART_PATTERN.fullmatch(position_part):
        raise InvalidVideoIdError(f"Invalid video id: {video_id!r}")

    return VideoLocation(shard_index=int(shard_part), position=int(position_part))


__all__ = [
    "ID_SEPARATOR",
    "InvalidVideoIdError",
    "VideoLocation",
    "decode_video_id",
    "encode_video_id",
]
