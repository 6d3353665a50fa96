"""Package logger for markd."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("markd")
logger.addHandler(logging.NullHandler())


def setup_logging(verbose: bool = False) -> None:
    """Route the package logger to stderr.

    ``WARNING`` by default; ``DEBUG`` with ``--verbose`` or ``MARKD_DEBUG=1``.
    """
    if verbose or os.environ.get("MARKD_DEBUG") == "1":
        level = logging.DEBUG
    else:
        level = logging.WARNING

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
