"""Pure helpers that turn raw shard records into :class:`~vidcat.models.video.Video` entities."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Sequence

from vidcat.models.video import RawVideoRecord, Video
from vidcat.utils.identity import encode_video_id

DEFAULT_DELIMITER = ";"
DEFAULT_TITLE = "Untitled Video"
UNCATEGORIZED = "Uncategorized"

_LEADING_INT_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")
_EMBED_SRC_PATTERN = re.compile(r"""src\s*=\s*["']([^"']+)["']""", re.IGNORECASE)
_WHITESPACE_PATTERN = re.compile(r"\s+")
_TENTH = Decimal("0.1")


def parse_int(raw: Optional[str]) -> int:
    """Parse the leading integer of ``raw``; unparseable or negative input yields ``0``."""

    if not raw:
        return 0
    match = _LEADING_INT_PATTERN.match(raw)
    if match is None:
        return 0
    return max(0, int(match.group(1)))


def format_duration(total_seconds: int) -> str:
    """Format seconds as ``minutes:seconds`` with two-digit seconds (``65 -> "1:05"``)."""

    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"


def format_view_count(count: int) -> str:
    """Abbreviate a view count: ``1500000 -> "1.5M"``, ``2500 -> "2.5K"``, ``999 -> "999"``.

    Halves round up, so ``1250 -> "1.3K"``.
    """

    if count >= 1_000_000:
        return f"{_one_decimal(count, 1_000_000)}M"
    if count >= 1_000:
        return f"{_one_decimal(count, 1_000)}K"
    return str(count)


def _one_decimal(count: int, unit: int) -> Decimal:
    return (Decimal(count) / unit).quantize(_TENTH, rounding=ROUND_HALF_UP)


def split_list(raw: Optional[str], delimiter: str = DEFAULT_DELIMITER) -> List[str]:
    """Split a delimiter-joined field, trimming items and dropping empties.

    Order and duplicates are preserved.
    """

    if not raw:
        return []
    return [item.strip() for item in raw.split(delimiter) if item.strip()]


def extract_embed_url(embed_code: Optional[str]) -> str:
    """Return the first quoted ``src=`` URL in the embed markup, or ``""`` when absent."""

    if not embed_code:
        return ""
    match = _EMBED_SRC_PATTERN.search(embed_code)
    return match.group(1) if match else ""


def primary_category(categories: Sequence[str]) -> str:
    return categories[0] if categories else UNCATEGORIZED


def slugify(name: str) -> str:
    """Derive a facet id from its display name (``"Big Name" -> "big-name"``)."""

    return _WHITESPACE_PATTERN.sub("-", name.strip().lower())


def normalize_record(
    raw: RawVideoRecord,
    shard_index: int,
    position: int,
    *,
    delimiter: str = DEFAULT_DELIMITER,
) -> Video:
    """Build the normalized :class:`Video` for the record at ``position`` in ``shard_index``."""

    duration_seconds = parse_int(raw.duration)
    views_count = parse_int(raw.views)
    categories = split_list(raw.categories, delimiter)

    return Video(
        id=encode_video_id(shard_index, position),
        title=raw.title or DEFAULT_TITLE,
        thumbnail_url=raw.thumbnail,
        thumbnail2_url=raw.thumbnail2 or None,
        embed_code=raw.embed,
        embed_url=extract_embed_url(raw.embed),
        duration=format_duration(duration_seconds),
        duration_seconds=duration_seconds,
        views=format_view_count(views_count),
        views_count=views_count,
        likes=parse_int(raw.likes),
        dislikes=parse_int(raw.dislikes),
        category=primary_category(categories),
        categories=categories,
        tags=split_list(raw.tags, delimiter),
        actors=split_list(raw.actors, delimiter),
        screenshots=split_list(raw.screenshots, delimiter),
    )


__all__ = [
    "DEFAULT_DELIMITER",
    "DEFAULT_TITLE",
    "UNCATEGORIZED",
    "extract_embed_url",
    "format_duration",
    "format_view_count",
    "normalize_record",
    "parse_int",
    "primary_category",
    "slugify",
    "split_list",
]
