"""CLI entry point for distrovitals."""

import asyncio
import dataclasses
import json
import logging
from pathlib import Path

# Load .env file if it exists
from dotenv import load_dotenv
load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn

from distrovitals.api.client import DistroVitalsClient
from distrovitals.session import DashboardSession
from distrovitals.tui.render import detail_renderable, ranking_renderable

app = typer.Typer(help="Browse Linux distribution health rankings from a DistroVitals server.")

console = Console()

DEFAULT_API_URL = "http://localhost:8080"


@dataclasses.dataclass
class Settings:
    """Connection settings shared by every command."""

    api_url: str = DEFAULT_API_URL
    timeout: float = 30.0

    def session(self) -> DashboardSession:
        return DashboardSession(DistroVitalsClient(self.api_url, timeout=self.timeout))


@app.callback()
def main(
    ctx: typer.Context,
    api_url: str = typer.Option(
        DEFAULT_API_URL, "--api-url", envvar="DISTROVITALS_API_URL", help="DistroVitals server URL"
    ),
    timeout: float = typer.Option(
        30.0, "--timeout", envvar="DISTROVITALS_TIMEOUT", help="HTTP timeout in seconds"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Package-wide options."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    ctx.obj = Settings(api_url=api_url, timeout=timeout)


async def _load(session: DashboardSession) -> None:
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task("Fetching rankings...", total=None)
        await session.load()

    if session.load_error is not None:
        console.print(ranking_renderable(session.ranking_view()))
        raise typer.Exit(1)


@app.command()
def rankings(
    ctx: typer.Context,
    page: int = typer.Option(1, "--page", "-p", help="Page number"),
) -> None:
    """Show one page of the health rankings."""
    asyncio.run(_rankings(ctx.obj, page))


async def _rankings(settings: Settings, page: int) -> None:
    """Async implementation of rankings."""
    session = settings.session()
    await _load(session)

    if not session.go_to_page(page) and page != 1:
        console.print(
            f"[yellow]Page {page} is out of range (1-{session.total_pages}), showing page 1[/yellow]"
        )

    console.print(ranking_renderable(session.ranking_view()))


@app.command()
def show(
    ctx: typer.Context,
    slug: str = typer.Argument(..., help="Distribution slug, e.g. debian"),
    methodology: bool = typer.Option(
        False, "--methodology", "-m", help="Expand the score methodology"
    ),
) -> None:
    """Show health details for one distribution."""
    asyncio.run(_show(ctx.obj, slug, methodology))


async def _show(settings: Settings, slug: str, expand_methodology: bool) -> None:
    """Async implementation of show."""
    session = settings.session()
    await _load(session)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(f"Fetching {slug} details...", total=None)
        detail = await session.open_detail(slug)

    if detail is None:
        console.print(f"[red]Distribution '{slug}' is not in the rankings[/red]")
        raise typer.Exit(1)

    panel = detail.methodology.toggled() if expand_methodology else detail.methodology
    console.print()
    console.print(detail_renderable(detail, panel))


@app.command()
def export(
    ctx: typer.Context,
    page: int = typer.Option(1, "--page", "-p", help="Page number"),
    slug: str | None = typer.Option(None, "--slug", "-s", help="Export this distribution's detail view"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output JSON file"),
) -> None:
    """Export a ranking page or detail view model as JSON."""
    asyncio.run(_export(ctx.obj, page, slug, output))


async def _export(settings: Settings, page: int, slug: str | None, output: Path | None) -> None:
    """Async implementation of export."""
    session = settings.session()
    await _load(session)

    if slug is not None:
        model = await session.open_detail(slug)
        if model is None:
            console.print(f"[red]Distribution '{slug}' is not in the rankings[/red]")
            raise typer.Exit(1)
        data = dataclasses.asdict(model)
        data["health"] = model.health.model_dump(mode="json") if model.health else None
    else:
        if not session.go_to_page(page) and page != 1:
            console.print(f"[red]Page {page} is out of range (1-{session.total_pages})[/red]")
            raise typer.Exit(1)
        data = dataclasses.asdict(session.ranking_view())

    text = json.dumps(data, indent=2, default=str, ensure_ascii=False)
    if output:
        output.write_text(text)
        console.print(f"[green]Saved to {output}[/green]")
    else:
        typer.echo(text)


@app.command()
def dashboard(ctx: typer.Context) -> None:
    """Launch the interactive rankings dashboard.

    Controls:
      enter - open the selected distribution (or its source link)
      n / p - next / previous page
      b, esc - back to the list
      m - toggle the score methodology
      q - quit
    """
    from distrovitals.tui import run_dashboard

    run_dashboard(ctx.obj.api_url, timeout=ctx.obj.timeout)


@app.command()
def version() -> None:
    """Show version information."""
    from distrovitals import __version__

    console.print(f"distrovitals v{__version__}")


if __name__ == "__main__":
    app()
