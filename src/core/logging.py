from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """Route all log records to stderr through Rich.

    stdout stays reserved for command output (`list` prints names there).
    """

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    # Replace a handler installed by an earlier call; leave foreign ones alone.
    others = [h for h in logging.root.handlers if not isinstance(h, RichHandler)]
    logging.root.handlers = [*others, handler]
    logging.root.setLevel(level.upper())
    # httpx logs every request at INFO; keep it quiet unless we are debugging.
    logging.getLogger("httpx").setLevel(logging.DEBUG if level.upper() == "DEBUG" else logging.WARNING)
