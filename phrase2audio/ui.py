"""
UI module for phrase2audio package.

Contains the Rich console, logging setup and progress display.
"""

import logging
from contextlib import contextmanager

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

# stdout stays free for meta command output (e.g. --list-voices)
console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@contextmanager
def progress_context():
    """Transient Rich progress display. Yields the Progress instance."""
    with Progress(
        SpinnerColumn(),
        TextColumn("{task.description}"),
        TimeElapsedColumn(),
        transient=True,
        console=console,
    ) as progress:
        yield progress
