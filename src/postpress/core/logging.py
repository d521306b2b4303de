import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(log_level: str = "INFO", console: Console | None = None) -> None:
    """Configure root logging with a Rich handler."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=[
            RichHandler(
                console=console or Console(stderr=True),
                rich_tracebacks=True,
                show_path=False,
                log_time_format="[%Y-%m-%d %H:%M:%S]",
            )
        ],
        force=True,
    )

    # Quieten down noisy libraries
    logging.getLogger("markdown_it").setLevel(logging.WARNING)

