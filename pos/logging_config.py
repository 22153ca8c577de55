"""
Logging setup for the POS server.

Module loggers are plain ``logging.getLogger(__name__)``; this only decides
where they go and how they look.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Send every record to stderr through rich. Returns the ``pos`` logger."""
    level = logging.DEBUG if verbose else logging.INFO

    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=verbose)
    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[handler])

    logger = logging.getLogger("pos")
    logger.setLevel(level)
    return logger
