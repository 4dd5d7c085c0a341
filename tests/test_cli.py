"""Tests for the vidcat Typer commands."""

import json

import pytest
from typer.testing import CliRunner

from conftest import make_record
from vidcat.cli.commands.catalog import CatalogExitCode
from vidcat.cli.main import create_app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def catalog_app(write_shard, make_settings, console):
    write_shard(
        1,
        [
            make_record("Harbour lights", categories="Travel;Night", actors="Anna Smith", tags="drone", views="1500000"),
            make_record("Street food", categories="Food", actors="Bob", tags="city"),
        ],
    )
    write_shard(2, [make_record("Night market", categories="Food;Travel", actors="Joanne", tags="city;night")])
    return create_app(console=console, settings=make_settings())


class TestVideos:
    """Tests for the videos command."""

    def test_default_page_as_json(self, runner, catalog_app):
        result = runner.invoke(catalog_app, ["videos", "--json"])

        assert result.exit_code == CatalogExitCode.SUCCESS
        payload = json.loads(result.output)
        assert payload["page"] == 1
        assert payload["totalPages"] == 2
        assert payload["totalVideos"] == 4
        assert payload["hasNext"] is True
        assert [video["id"] for video in payload["videos"]] == ["1-0", "1-1"]
        assert payload["videos"][0]["views"] == "1.5M"

    def test_invalid_page_falls_back_to_first(self, runner, catalog_app):
        result = runner.invoke(catalog_app, ["videos", "--page", "abc", "--json"])

        assert result.exit_code == CatalogExitCode.SUCCESS
        assert json.loads(result.output)["page"] == 1

    def test_search_takes_precedence(self, runner, catalog_app):
        result = runner.invoke(catalog_app, ["videos", "--search", "market", "--category", "Travel", "--json"])

        payload = json.loads(result.output)
        assert [video["title"] for video in payload["videos"]] == ["Night market"]

    def test_category_filter(self, runner, catalog_app):
        result = runner.invoke(catalog_app, ["videos", "--category", "food", "--json"])

        payload = json.loads(result.output)
        assert [video["id"] for video in payload["videos"]] == ["1-1", "2-0"]
        assert payload["totalVideos"] == 2

    def test_performer_filter(self, runner, catalog_app):
        result = runner.invoke(catalog_app, ["videos", "--performer", "ann", "--json"])

        assert [video["id"] for video in json.loads(result.output)["videos"]] == ["1-0", "2-0"]

    def test_table_output(self, runner, catalog_app, console_output):
        result = runner.invoke(catalog_app, ["videos", "--tag", "city"])

        assert result.exit_code == CatalogExitCode.SUCCESS
        rendered = console_output.getvalue()
        assert "Tag: city" in rendered
        assert "Street food" in rendered

    def test_corrupt_shard(self, runner, write_corrupt_shard, catalog_app):
        write_corrupt_shard(2)

        result = runner.invoke(catalog_app, ["videos", "--page", "2"])

        assert result.exit_code == CatalogExitCode.CORRUPT_DATA


class TestVideo:
    """Tests for the video command."""

    def test_lookup_as_json(self, runner, catalog_app):
        result = runner.invoke(catalog_app, ["video", "2-0", "--json"])

        assert result.exit_code == CatalogExitCode.SUCCESS
        payload = json.loads(result.output)
        assert payload["id"] == "2-0"
        assert payload["title"] == "Night market"
        assert payload["categories"] == ["Food", "Travel"]
        assert payload["embedUrl"] == "https://player.example.test/embed/abc"

    def test_panel_output(self, runner, catalog_app, console_output):
        result = runner.invoke(catalog_app, ["video", "1-0"])

        assert result.exit_code == CatalogExitCode.SUCCESS
        assert "Harbour lights" in console_output.getvalue()

    def test_invalid_id(self, runner, catalog_app):
        result = runner.invoke(catalog_app, ["video", "not-an-id"])

        assert result.exit_code == CatalogExitCode.INVALID_INPUT

    def test_not_found(self, runner, catalog_app):
        result = runner.invoke(catalog_app, ["video", "1-99"])

        assert result.exit_code == CatalogExitCode.NOT_FOUND


class TestFacetsAndStats:
    """Tests for facet listings and totals."""

    def test_categories(self, runner, catalog_app):
        result = runner.invoke(catalog_app, ["categories", "--json"])

        payload = json.loads(result.output)
        assert [(entry["name"], entry["count"]) for entry in payload] == [("Travel", 2), ("Food", 2), ("Night", 1)]
        assert payload[0]["id"] == "travel"
        assert payload[0]["icon"] == "folder"

    def test_performers_with_limit(self, runner, catalog_app):
        result = runner.invoke(catalog_app, ["performers", "--limit", "1", "--json"])

        payload = json.loads(result.output)
        assert payload == [{"id": "anna-smith", "name": "Anna Smith", "videoCount": 1}]

    def test_tags_table(self, runner, catalog_app, console_output):
        result = runner.invoke(catalog_app, ["tags"])

        assert result.exit_code == CatalogExitCode.SUCCESS
        assert "city" in console_output.getvalue()

    def test_stats(self, runner, catalog_app):
        result = runner.invoke(catalog_app, ["stats", "--json"])

        assert json.loads(result.output) == {"totalPages": 2, "totalVideos": 4}


def test_missing_directory(runner, tmp_path, make_settings, console):
    app = create_app(console=console, settings=make_settings(catalog_data_dir=tmp_path / "missing"))

    result = runner.invoke(app, ["stats"])

    assert result.exit_code == CatalogExitCode.INITIALIZATION_ERROR
