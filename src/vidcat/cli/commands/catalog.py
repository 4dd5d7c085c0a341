"""CLI commands for browsing, looking up, and summarising the video catalog."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Optional, Sequence

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from vidcat.config.settings import Settings
from vidcat.db.repositories import CorruptShardError, RecordNotFoundError
from vidcat.models.base import VidcatBaseModel
from vidcat.models.page import PaginatedVideos
from vidcat.models.query import BrowseRequest
from vidcat.models.video import Video
from vidcat.services.browse import dispatch_browse
from vidcat.services.catalog import CatalogEngine, CatalogInitializationError
from vidcat.utils.identity import InvalidVideoIdError


class CatalogExitCode:
    """Mapping of meaningful CLI exit codes."""

    SUCCESS = 0
    INVALID_INPUT = 1
    NOT_FOUND = 2
    CORRUPT_DATA = 3
    INITIALIZATION_ERROR = 4


def register(app: typer.Typer, console: Console, settings: Optional[Settings] = None) -> None:
    """Register catalog query commands."""

    @lru_cache(maxsize=1)
    def get_engine() -> CatalogEngine:
        return CatalogEngine(settings=settings, console=console)

    def load_engine() -> CatalogEngine:
        try:
            return get_engine()
        except CatalogInitializationError as exc:
            console.print(f"[red]Catalog unavailable:[/red] {exc}")
            raise typer.Exit(code=CatalogExitCode.INITIALIZATION_ERROR) from exc

    @app.command("videos")
    def videos(  # pylint: disable=too-many-arguments
        page: str = typer.Option("1", "--page", "-p", help="Page number (invalid values fall back to 1)"),
        search: Optional[str] = typer.Option(None, "--search", "-s", help="Free-text query"),
        category: Optional[str] = typer.Option(None, "--category", help="Exact category name"),
        performer: Optional[str] = typer.Option(None, "--performer", help="Performer name or fragment"),
        tag: Optional[str] = typer.Option(None, "--tag", help="Exact tag name"),
        json_output: bool = typer.Option(False, "--json", help="Output the result page as JSON"),
    ) -> None:
        request = BrowseRequest(page=page, search=search, category=category, performer=performer, tag=tag)
        engine = load_engine()

        try:
            result = dispatch_browse(engine, request)
        except CorruptShardError as exc:
            console.print(f"[red]Catalog data error:[/red] {exc}")
            raise typer.Exit(code=CatalogExitCode.CORRUPT_DATA) from exc

        if json_output:
            typer.echo(_to_json(result))
            return

        _render_page(console, result, title=_describe_request(request))

    @app.command("video")
    def video(
        video_id: str = typer.Argument(..., help="Video id in the form SHARD-POSITION"),
        json_output: bool = typer.Option(False, "--json", help="Output the video as JSON"),
    ) -> None:
        engine = load_engine()

        try:
            found = engine.get_by_id(video_id.strip())
        except InvalidVideoIdError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(code=CatalogExitCode.INVALID_INPUT) from exc
        except RecordNotFoundError as exc:
            console.print(f"[yellow]Video not found:[/yellow] {video_id}")
            raise typer.Exit(code=CatalogExitCode.NOT_FOUND) from exc
        except CorruptShardError as exc:
            console.print(f"[red]Catalog data error:[/red] {exc}")
            raise typer.Exit(code=CatalogExitCode.CORRUPT_DATA) from exc

        if json_output:
            typer.echo(_to_json(found))
            return

        console.print(_build_video_panel(found))

    @app.command("categories")
    def categories(
        limit: Optional[int] = typer.Option(None, "--limit", min=1, help="Maximum entries to show"),
        json_output: bool = typer.Option(False, "--json", help="Output facets as JSON"),
    ) -> None:
        entries = load_engine().facet_categories()[:limit]
        if json_output:
            typer.echo(_to_json(entries))
            return

        table = Table(title="Categories (estimated counts)")
        table.add_column("Name")
        table.add_column("Id")
        table.add_column("Icon")
        table.add_column("Videos", justify="right")
        for entry in entries:
            table.add_row(entry.name, entry.id, entry.icon, str(entry.count))
        console.print(table)

    @app.command("performers")
    def performers(
        limit: Optional[int] = typer.Option(None, "--limit", min=1, help="Maximum entries to show"),
        json_output: bool = typer.Option(False, "--json", help="Output facets as JSON"),
    ) -> None:
        entries = load_engine().facet_performers()[:limit]
        if json_output:
            typer.echo(_to_json(entries))
            return

        table = Table(title="Performers (estimated counts)")
        table.add_column("Name")
        table.add_column("Id")
        table.add_column("Videos", justify="right")
        for entry in entries:
            table.add_row(entry.name, entry.id, str(entry.video_count))
        console.print(table)

    @app.command("tags")
    def tags(
        limit: Optional[int] = typer.Option(None, "--limit", min=1, help="Maximum entries to show"),
        json_output: bool = typer.Option(False, "--json", help="Output facets as JSON"),
    ) -> None:
        entries = load_engine().facet_tags()[:limit]
        if json_output:
            typer.echo(_to_json(entries))
            return

        table = Table(title="Tags (estimated counts)")
        table.add_column("Name")
        table.add_column("Id")
        table.add_column("Videos", justify="right")
        for entry in entries:
            table.add_row(entry.name, entry.id, str(entry.count))
        console.print(table)

    @app.command("stats")
    def stats(
        json_output: bool = typer.Option(False, "--json", help="Output totals as JSON"),
    ) -> None:
        totals = load_engine().stats()
        if json_output:
            typer.echo(_to_json(totals))
            return

        console.print(f"Pages: {totals.total_pages} | Videos (estimated): {totals.total_videos}")


def _to_json(payload: VidcatBaseModel | Sequence[VidcatBaseModel]) -> str:
    if isinstance(payload, VidcatBaseModel):
        data: object = payload.model_dump(mode="json", by_alias=True)
    else:
        data = [item.model_dump(mode="json", by_alias=True) for item in payload]
    return json.dumps(data, ensure_ascii=False, indent=2)


def _describe_request(request: BrowseRequest) -> str:
    if request.search:
        return f"Search: {request.search}"
    if request.category:
        return f"Category: {request.category}"
    if request.performer:
        return f"Performer: {request.performer}"
    if request.tag:
        return f"Tag: {request.tag}"
    return "Videos"


def _render_page(console: Console, result: PaginatedVideos, *, title: str) -> None:
    table = Table(title=f"{title} (page {result.page} of {result.total_pages})")
    table.add_column("Id")
    table.add_column("Title", overflow="fold")
    table.add_column("Duration", justify="right")
    table.add_column("Views", justify="right")
    table.add_column("Category")
    table.add_column("Performers", overflow="fold")

    for item in result.videos:
        table.add_row(
            item.id,
            item.title,
            item.duration,
            item.views,
            item.category,
            ", ".join(item.actors) or "-",
        )

    console.print(table)
    console.print(
        f"Videos: {result.total_videos} | Previous: {'yes' if result.has_previous else 'no'} | "
        f"Next: {'yes' if result.has_next else 'no'}"
    )


def _build_video_panel(item: Video) -> Panel:
    grid = Table.grid(padding=(0, 1))
    grid.add_column()

    grid.add_row(f"[bold]Id:[/bold] {item.id}")
    grid.add_row(f"[bold]Duration:[/bold] {item.duration} | [bold]Views:[/bold] {item.views}")
    grid.add_row(f"[bold]Likes:[/bold] {item.likes} | [bold]Dislikes:[/bold] {item.dislikes}")
    grid.add_row(f"[bold]Embed:[/bold] {item.embed_url or 'unavailable'}")

    if item.categories:
        grid.add_row(f"[bold]Categories:[/bold] {', '.join(item.categories)}")
    if item.actors:
        grid.add_row(f"[bold]Performers:[/bold] {', '.join(item.actors)}")
    if item.tags:
        grid.add_row(f"[bold]Tags:[/bold] {', '.join(item.tags)}")
    if item.screenshots:
        grid.add_row(f"[bold]Screenshots:[/bold] {len(item.screenshots)}")

    return Panel.fit(grid, title=item.title, border_style="magenta")


__all__ = ["CatalogExitCode", "register"]
