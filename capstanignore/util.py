import logging
import sys
from typing import Optional

import click

from capstanignore.constants import Colors
from capstanignore.env import Env
from capstanignore.verbose_logging import VERBOSE

global FORCE_COLOR
FORCE_COLOR = False
global FORCE_NO_COLOR
FORCE_NO_COLOR = False


def set_flags(
    *, verbose: bool, debug: bool, quiet: bool, env: Optional[Env] = None
) -> None:
    """Set the relevant logging levels and color preferences"""
    # Assumes only one of verbose, debug, quiet is True
    logger = logging.getLogger("capstanignore")
    logger.handlers = []  # Reset to no handlers

    level = logging.INFO
    if verbose:
        level = VERBOSE
    elif debug:
        level = logging.DEBUG
    elif quiet:
        level = logging.CRITICAL

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)

    env = env or Env()
    global FORCE_COLOR
    FORCE_COLOR = env.force_color
    global FORCE_NO_COLOR
    FORCE_NO_COLOR = env.no_color


def with_color(color: Colors, text: str, bold: bool = False) -> str:
    """
    Wrap text in color & reset
    """
    if FORCE_NO_COLOR and not FORCE_COLOR:
        # NO_COLOR is a convention shared across tools, CAPSTANIGNORE_FORCE_COLOR
        # is ours, so the more specific one wins
        return text
    if not sys.stdout.isatty() and not FORCE_COLOR:
        return text
    return click.style(text, fg=color.value, bold=bold)
