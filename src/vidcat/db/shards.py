"""File-backed shard storage: one JSON array of raw records per shard file."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from vidcat.config.settings import Settings, get_settings
from vidcat.db.repositories import CorruptShardError, ShardDirectoryError
from vidcat.models.video import RawVideoRecord

DEFAULT_SHARD_PREFIX = "videos_page_"
DEFAULT_SHARD_SUFFIX = ".json"

_RECORDS_ADAPTER = TypeAdapter(List[RawVideoRecord])


class ShardDirectory:
    """Directory of shard files named ``prefix + index + suffix`` (``videos_page_1.json``)."""

    def __init__(
        self,
        root: Path,
        *,
        prefix: str = DEFAULT_SHARD_PREFIX,
        suffix: str = DEFAULT_SHARD_SUFFIX,
    ) -> None:
        self._root = Path(root)
        self._prefix = prefix
        self._suffix = suffix
        self._name_pattern = re.compile(f"{re.escape(prefix)}[0-9]+{re.escape(suffix)}")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ShardDirectory":
        """Build a directory handle from configured path and naming convention."""

        settings = settings or get_settings()
        return cls(settings.catalog_data_dir, prefix=settings.shard_prefix, suffix=settings.shard_suffix)

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, shard_index: int) -> Path:
        """Return the file path backing ``shard_index``."""

        return self._root / f"{self._prefix}{shard_index}{self._suffix}"

    def discover(self) -> int:
        """Count the shard files present in the directory.

        Raises
        ------
        ShardDirectoryError
            If the directory is missing or cannot be listed.
        """

        try:
            entries = list(self._root.iterdir())
        except OSError as exc:
            raise ShardDirectoryError(f"Cannot list shard directory {self._root}: {exc}") from exc

        return sum(1 for entry in entries if self._name_pattern.fullmatch(entry.name) and entry.is_file())

    def read_records(self, shard_index: int) -> Optional[List[RawVideoRecord]]:
        """Read and validate every record of a shard.

        Returns ``None`` when the shard file does not exist; shard numbering may be sparse.

        Raises
        ------
        CorruptShardError
            If the file cannot be read or is not a JSON array of record objects.
        """

        path = self.path_for(shard_index)
        try:
            payload = path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise CorruptShardError(shard_index, str(exc)) from exc

        try:
            return _RECORDS_ADAPTER.validate_json(payload)
        except ValidationError as exc:
            raise CorruptShardError(shard_index, f"{exc.error_count()} validation error(s)") from exc


__all__ = ["DEFAULT_SHARD_PREFIX", "DEFAULT_SHARD_SUFFIX", "ShardDirectory"]
