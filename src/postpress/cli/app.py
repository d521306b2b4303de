"""Main Typer application for Postpress."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from postpress.cli.errorhandler import handle_cli_errors
from postpress.core.config_loader import load_config
from postpress.core.loader import load_posts
from postpress.core.logging import setup_logging
from postpress.core.pipeline import build_site, render

app = typer.Typer(
    name="postpress",
    help="Render a Markdown blog with front-matter into a static site",
    add_completion=False,
)

console = Console()

SiteRootOption = Annotated[
    Path,
    typer.Option("--site-root", "-s", help="Directory holding _config.yml, _posts and _layouts."),
]
DebugOption = Annotated[bool, typer.Option("--debug", help="Show full tracebacks on errors.")]


@app.callback()
def main(
    log_level: Annotated[str, typer.Option("--log-level", help="Logging level.")] = "WARNING",
) -> None:
    """Configure logging for every command."""
    setup_logging(log_level)


@app.command()
def build(
    site_root: SiteRootOption = Path("."),
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Output directory (overrides _config.yml).")
    ] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Render without writing files.")] = False,
    debug: DebugOption = False,
) -> None:
    """Build the site into the output directory."""
    with handle_cli_errors(debug=debug):
        config = load_config(site_root.resolve())
        if output is not None:
            config.paths.output_dir = output.resolve()

        site = build_site(config, dry_run=dry_run)

    target = config.paths.abs_output_dir
    if dry_run:
        console.print(f"Rendered {len(site.posts)} posts ([yellow]dry run[/yellow], nothing written).")
    else:
        console.print(f"[green]Built {len(site.posts)} posts into {target}[/green]")


@app.command()
def posts(
    site_root: SiteRootOption = Path("."),
    debug: DebugOption = False,
) -> None:
    """List posts in the order they appear on the index, newest first."""
    with handle_cli_errors(debug=debug):
        config = load_config(site_root.resolve())
        loaded = load_posts(config)

    table = Table(title=config.title)
    table.add_column("Date", style="bold cyan")
    table.add_column("Title")
    table.add_column("Permalink")
    table.add_column("Authors")

    for post in loaded:
        table.add_row(post.date.isoformat(), post.title, post.permalink, ", ".join(post.authors))

    console.print(table)


@app.command()
def check(
    site_root: SiteRootOption = Path("."),
    debug: DebugOption = False,
) -> None:
    """Load and render every page without writing anything."""
    with handle_cli_errors(debug=debug):
        config = load_config(site_root.resolve())
        site = render(config)

    console.print(f"[bold green]✔[/bold green] {len(site.posts)} posts, {len(site.pages)} pages render cleanly")


if __name__ == "__main__":
    app()
