"""Logging setup for the command line entry point.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are installed here, once, by the application.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_FORMAT = "%(name)s: %(message)s"


def configure_logging(level: int = logging.WARNING, format: str | None = None) -> None:
    """Configure the root logger.

    Records go to stderr so generated output on stdout stays machine readable.
    If handlers are already installed only the level is changed.
    """
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return

    logging.basicConfig(
        level=level,
        format=format or DEFAULT_FORMAT,
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
