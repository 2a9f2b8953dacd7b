"""Logging setup for the dn-check CLI."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Third-party loggers that are too chatty for a console tool
QUIET_LOGGERS = ("dns", "asyncio")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """Send dn_check log records to stderr through rich.

    WARNING and above by default, everything with ``verbose``.
    """
    logger = logging.getLogger("dn_check")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.handlers = []

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=verbose,
        show_path=False,
        markup=False
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.CRITICAL)

    return logger
