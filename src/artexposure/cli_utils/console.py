"""
art-exposure console utilities

This module provides application-wide access to a Rich Console object for
handling writing to stdout and stderr. Debug detail goes through the standard
logging module and is rendered by Rich as well, so everything the user sees
shares one theme.
"""

import logging
from io import StringIO

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

art_theme = Theme(
    {"warning": "orange_red1", "fail": "bold red", "confirm": "", "describe": ""}
)

console = Console(theme=art_theme)
error_console = Console(theme=art_theme, stderr=True)

logger = logging.getLogger("artexposure")
logger.addHandler(RichHandler(console=error_console, show_path=False))
logger.setLevel(logging.WARNING)


def set_verbosity(verbosity: str):
    """
    Apply a verbosity level to all consoles. "quiet" captures stdout and stderr
    to a junk stream, "debug" turns on log output.
    """

    if verbosity == "quiet":
        console.file = StringIO()
        error_console.file = StringIO()

    else:
        # None falls back to whatever sys.stdout / sys.stderr are at print time
        console.file = None
        error_console.file = None

    logger.setLevel(logging.DEBUG if verbosity == "debug" else logging.WARNING)


"""
Formatting helpers
"""


def warn(msg: str):
    """
    Format msg and print to stderr.
    """

    error_console.print(
        f":exclamation_mark-emoji: [bold]warning: [/] {msg}", style="warning"
    )


def describe(msg: str, **kwargs):
    """
    Format descriptive msg and print to stdout.
    """

    console.print(f"{msg}", style="describe", **kwargs)


def confirm_success(msg: str, **kwargs):
    """
    Format confirmation msg and print to stdout. Accept any additional kwargs that console.print from
    rich module exposes.
    """

    console.print(f"{msg}", style="confirm", **kwargs)


def fail(msg: str):
    """
    Format failure msg and print to stderr.
    """

    error_console.print(f":x-emoji: failed. {msg}", style="fail")


def log(msg: str, *args):
    """
    Send msg to the art-exposure logger at debug level. Only shown with --debug.
    """

    logger.debug(msg, *args)
