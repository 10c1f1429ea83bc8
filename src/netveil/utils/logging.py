import logging
import os
from typing import Literal, Optional

from rich.console import Console
from rich.logging import RichHandler

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]

LOG_FORMAT = "%(message)s"


def setup_logging(verbose: bool = False, level: Optional[LogLevel] = None) -> None:
    """
    Send netveil logs to stderr through rich.

    ``NETVEIL_LOGLEVEL`` wins over ``verbose``; an explicit ``level`` wins over
    both.
    """
    if level is None:
        level = os.environ.get("NETVEIL_LOGLEVEL", "DEBUG" if verbose else "WARNING")

    logger = logging.getLogger("netveil")
    logger.setLevel(level.upper())
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True), show_path=False, markup=False
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
