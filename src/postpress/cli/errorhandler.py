"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.console import Console

from postpress.core.exceptions import ConfigError, LayoutError, PostError, PostpressError

console = Console(stderr=True)


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Args:
        debug: If True, re-raise with the full traceback. If False, print a one-line error.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit):
        raise
    except ConfigError as e:
        if debug:
            raise
        console.print(f"[bold red]Configuration error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except PostError as e:
        if debug:
            raise
        console.print(f"[bold red]Post error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except LayoutError as e:
        if debug:
            raise
        console.print(f"[bold red]Layout error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except PostpressError as e:
        if debug:
            raise
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e
