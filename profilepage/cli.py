"""Command-line interface for profilepage."""

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from profilepage import ProfilePage, PageConfig, SQLiteDataSource, save_json, to_json, __version__
from profilepage.config import LogFormat
from profilepage.core.presenter import metadata_to_dict
from profilepage.logging import configure_logging
from profilepage.models.outcome import NotFound

app = typer.Typer(
    name="profilepage",
    help="User profile pages",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"profilepage version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """profilepage - user profile pages."""
    pass


@app.command()
def show(
    username: str = typer.Argument(..., help="Username of the profile"),
    viewer: Optional[str] = typer.Option(
        None, "--viewer", help="User id of the viewer, for follow status"
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the view-model as JSON"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the view-model to a JSON file"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Log as JSON instead of console output"
    ),
):
    """Load and display a profile page."""
    config = PageConfig(log_format=LogFormat.JSON if quiet else LogFormat.CONSOLE)
    if as_json:
        config.log_level = "WARNING"
    configure_logging(config)

    async def run():
        async with ProfilePage(config, viewer_id=viewer) as page:
            outcome = await page.load(username)

        if isinstance(outcome, NotFound):
            console.print(f"[red]Profile not found: {outcome.username}[/red]")
            raise typer.Exit(1)

        if as_json:
            typer.echo(to_json(outcome.view))
        else:
            _print_view(outcome.view)

        if output:
            save_json(outcome.view, output)
            if not as_json:
                console.print(f"[dim]Saved to {output}[/dim]")

    asyncio.run(run())


@app.command()
def meta(
    username: str = typer.Argument(..., help="Username of the profile"),
):
    """Print page metadata for a profile."""
    config = PageConfig()
    configure_logging(config)

    async def run():
        async with ProfilePage(config) as page:
            metadata = await page.metadata(username)
        console.print_json(json.dumps(metadata_to_dict(metadata)))

    asyncio.run(run())


@app.command()
def seed(
    fixture: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON fixture file"),
):
    """Load users, posts, likes and follows into the database."""
    config = PageConfig()
    configure_logging(config)
    data = json.loads(fixture.read_text(encoding="utf-8"))

    async def run():
        async with SQLiteDataSource(config.sqlite_path) as source:
            counts = await source.load_fixture(data)

        summary = ", ".join(f"{count} {name}" for name, count in counts.items())
        console.print(f"[green]✓[/green] Loaded {summary} into {config.sqlite_path}")

    asyncio.run(run())


def _print_view(view):
    """Print profile view-model as tables."""
    user = view.user

    table = Table(title=f"@{user.username}", show_header=False)
    table.add_column("Field", style="dim")
    table.add_column("Value")

    table.add_row("Name", user.name or "-")
    table.add_row("Bio", user.bio or "-")
    table.add_row("Posts", str(len(view.posts)))
    table.add_row("Liked", str(len(view.liked_posts)))
    table.add_row("Following", "✓" if view.is_following else "✗")

    console.print(table)

    if view.posts:
        console.print(f"\n[bold]Recent Posts ({len(view.posts)})[/bold]")
        for post in view.posts[:5]:
            text = post.content[:60] + "..." if len(post.content) > 60 else post.content
            console.print(f"  [dim]{post.created_at:%Y-%m-%d}[/dim]  {text}")


if __name__ == "__main__":
    app()
