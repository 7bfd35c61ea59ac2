"""Logging setup for the euclid-gcd CLI."""

from __future__ import annotations

import logging
from typing import IO

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(
    level: str = "WARNING",
    quiet: bool = False,
    stream: IO[str] | None = None,
) -> None:
    """Configure the root logger with a rich handler on standard error.

    Existing root handlers are removed so repeated calls do not duplicate
    output. Standard output is never used; it carries only the result.

    ``quiet`` calls ``logging.disable(logging.CRITICAL)``, which is process
    wide and outlives the CLI run. Callers embedding ``main()`` re-enable
    logging with ``logging.disable(logging.NOTSET)`` or a later non-quiet
    ``setup_logging`` call.
    """
    if quiet:
        logging.disable(logging.CRITICAL)
        logging.getLogger().handlers = []
        return

    logging.disable(logging.NOTSET)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console = Console(file=stream, stderr=stream is None)
    handler = RichHandler(console=console, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)
