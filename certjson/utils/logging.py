"""
Logging configuration for certjson.

Diagnostics go to stderr through rich so that stdout stays reserved for
artifact output.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from certjson.config import get_settings


def setup_logging(log_level: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Args:
        log_level: Logging level (defaults to settings)
    """
    settings = get_settings()
    log_level = log_level or settings.log_level

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
        tracebacks_show_locals=settings.dev_mode,
    )
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    logger = logging.getLogger(__name__)
    if settings.rejected_log_level:
        logger.warning(
            "Unknown CERTJSON_LOG_LEVEL %r, using %s", settings.rejected_log_level, settings.log_level
        )
    logger.debug("Logging configured at %s", log_level)
