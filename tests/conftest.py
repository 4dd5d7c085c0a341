"""Shared pytest fixtures for vidcat tests."""

import io
import json
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

import pytest
from rich.console import Console

from vidcat.config.settings import Settings
from vidcat.db.shards import ShardDirectory
from vidcat.models.video import RawVideoRecord


def make_record(
    title: str = "Sample video",
    *,
    tags: str = "",
    categories: str = "",
    actors: str = "",
    duration: str = "65",
    views: str = "1500",
    likes: str = "10",
    dislikes: str = "1",
    screenshots: str = "",
) -> Dict[str, str]:
    """Build one raw shard entry as it would appear on disk."""
    return {
        "embed": '<iframe src="https://player.example.test/embed/abc" frameborder="0"></iframe>',
        "thumbnail": "https://img.example.test/thumb.jpg",
        "screenshots": screenshots,
        "title": title,
        "tags": tags,
        "categories": categories,
        "actors": actors,
        "duration": duration,
        "views": views,
        "likes": likes,
        "dislikes": dislikes,
    }


class CountingShardDirectory(ShardDirectory):
    """Shard directory that records every shard read, in order."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.reads: List[int] = []

    def read_records(self, shard_index: int) -> Optional[List[RawVideoRecord]]:
        self.reads.append(shard_index)
        return super().read_records(shard_index)


@pytest.fixture
def shard_dir(tmp_path: Path) -> Path:
    """Empty directory that tests fill with shard files."""
    directory = tmp_path / "data"
    directory.mkdir()
    return directory


@pytest.fixture
def write_shard(shard_dir: Path) -> Callable[[int, Sequence[Dict[str, str]]], Path]:
    """Write a list of raw records as shard ``index``."""

    def _write(index: int, records: Sequence[Dict[str, str]]) -> Path:
        path = shard_dir / f"videos_page_{index}.json"
        path.write_text(json.dumps(list(records)), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_corrupt_shard(shard_dir: Path) -> Callable[[int], Path]:
    """Write unparseable content as shard ``index``."""

    def _write(index: int) -> Path:
        path = shard_dir / f"videos_page_{index}.json"
        path.write_text('[{"title": "truncated', encoding="utf-8")
        return path

    return _write


@pytest.fixture
def console_output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(console_output: io.StringIO) -> Console:
    """Console writing into a buffer so tests can inspect log lines."""
    return Console(file=console_output, width=200, force_terminal=False)


@pytest.fixture
def make_settings(shard_dir: Path) -> Callable[..., Settings]:
    """Settings pointed at the test shard directory, with optional overrides."""

    def _make(**overrides) -> Settings:
        params = {"catalog_data_dir": shard_dir, **overrides}
        return Settings(**params)

    return _make


@pytest.fixture
def counting_directory(shard_dir: Path) -> CountingShardDirectory:
    return CountingShardDirectory(shard_dir)
