"""Application settings loaded from environment variables and config files."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict

import yaml
from pydantic import BaseModel, ConfigDict, Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

from vidcat.config import CONFIG_ROOT

DEFAULT_CATEGORY_ICON = "folder"


class ScanLimit(BaseModel):
    """Bounds applied to a single scan-based catalog query."""

    max_shards: PositiveInt
    max_matches: PositiveInt

    model_config = ConfigDict(extra="forbid", frozen=True)


class QueryLimitConfig(BaseModel):
    """Per-operation scan limits for search and filter queries."""

    search: ScanLimit = ScanLimit(max_shards=20, max_matches=100)
    category: ScanLimit = ScanLimit(max_shards=30, max_matches=200)
    performer: ScanLimit = ScanLimit(max_shards=30, max_matches=100)
    tag: ScanLimit = ScanLimit(max_shards=30, max_matches=200)

    model_config = ConfigDict(extra="forbid", frozen=True)


def _load_query_limits(query_limit_path: Path) -> QueryLimitConfig:
    if not query_limit_path.exists():
        return QueryLimitConfig()

    raw_data = yaml.safe_load(query_limit_path.read_text(encoding="utf-8")) or {}

    operations: Dict[str, ScanLimit] = {}
    for operation_name, config in raw_data.get("operations", {}).items():
        operations[operation_name] = ScanLimit(**config)
    return QueryLimitConfig(**operations)


def _load_category_icons(icon_path: Path) -> Dict[str, str]:
    if not icon_path.exists():
        return {}

    raw_data = yaml.safe_load(icon_path.read_text(encoding="utf-8")) or {}
    return {str(name): str(icon) for name, icon in raw_data.get("icons", {}).items()}


class Settings(BaseSettings):
    """Primary settings for the catalog engine and its CLI host."""

    catalog_data_dir: Path = Field(default=Path("data"), alias="CATALOG_DATA_DIR")
    shard_prefix: str = Field(default="videos_page_", min_length=1, alias="CATALOG_SHARD_PREFIX")
    shard_suffix: str = Field(default=".json", alias="CATALOG_SHARD_SUFFIX")
    list_delimiter: str = Field(default=";", min_length=1, alias="CATALOG_LIST_DELIMITER")

    sample_shard_cap: PositiveInt = Field(default=50, alias="CATALOG_SAMPLE_SHARD_CAP")
    category_facet_limit: PositiveInt = Field(default=50, alias="CATALOG_CATEGORY_FACET_LIMIT")
    performer_facet_limit: PositiveInt = Field(default=100, alias="CATALOG_PERFORMER_FACET_LIMIT")
    tag_facet_limit: PositiveInt = Field(default=100, alias="CATALOG_TAG_FACET_LIMIT")
    results_per_page: PositiveInt = Field(default=20, alias="CATALOG_RESULTS_PER_PAGE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    query_limits: QueryLimitConfig = Field(
        default_factory=lambda: _load_query_limits(CONFIG_ROOT / "query_limits.yaml")
    )
    category_icons: Dict[str, str] = Field(
        default_factory=lambda: _load_category_icons(CONFIG_ROOT / "category_icons.yaml")
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def icon_for(self, category_name: str) -> str:
        """Return the display icon configured for a category name."""

        return self.category_icons.get(category_name, DEFAULT_CATEGORY_ICON)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached instance of the application settings."""

    return Settings()


__all__ = [
    "DEFAULT_CATEGORY_ICON",
    "QueryLimitConfig",
    "ScanLimit",
    "Settings",
    "get_settings",
]
