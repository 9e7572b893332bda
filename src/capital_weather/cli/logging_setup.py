"""Rich logging for the CLI.

Diagnostics go to stderr through `RichHandler`; result lines stay on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(*, verbose: bool = False) -> None:
    """Configure the root logger once (later calls only adjust the level)."""

    level = logging.DEBUG if verbose else logging.WARNING
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers:
        if isinstance(handler, RichHandler):
            return

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        markup=False,
        show_path=False,
        show_time=True,
        show_level=True,
    )
    root_logger.addHandler(handler)

    # Request logs from httpx/httpcore are too chatty even at DEBUG.
    for lib in ("httpx", "httpcore"):
        logging.getLogger(lib).setLevel(logging.WARNING)
