# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from .config import CFG


def get_logger(name: str, show_time: bool = False) -> logging.Logger:
    """
    Return a tarball logger printing to stderr through rich.

    Only INFO and above is shown unless the debug environment variable
    (`TARBALL_DEBUG` by default) is set, which also enables timestamps.
    """
    logger = logging.getLogger(name)

    debug_mode = os.environ.get(CFG.env_vars.debug_mode) is not None
    level = logging.DEBUG if debug_mode else logging.INFO
    logger.setLevel(level)

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        show_level=True,
        show_time=show_time or debug_mode,
        log_time_format=CFG.date_formats.standard,
        tracebacks_width=None,
        tracebacks_code_width=None,
    )
    handler.setLevel(level)

    logger.addHandler(handler)
    # messages are rendered only by the rich handler
    logger.propagate = False

    return logger
