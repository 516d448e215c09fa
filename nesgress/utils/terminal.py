"""
Terminal primitives for nesgress.

Everything that knows about escape sequences, glyph colouring or spinner
frames lives here so the coordinator only deals in plain text.
"""

import logging
import os
from typing import List, Optional, Tuple

from colorama import Fore, Style
from colorama.ansi import CSI, clear_line
from rich.spinner import Spinner


logger = logging.getLogger(__name__)

HIDE_CURSOR = f"{CSI}?25l"
SHOW_CURSOR = f"{CSI}?25h"
CLEAR_LINE = clear_line()

# Carriage return + erase, used before every redraw and completion line
RESET_LINE = "\r" + CLEAR_LINE

DEFAULT_SPINNER = "dots"


def is_truthy_env(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def spinner_frames(name: str = DEFAULT_SPINNER) -> Tuple[List[str], float]:
    """
    Look up a rich spinner by name.

    Args:
        name: Spinner name as known to rich (e.g. "dots", "line")

    Returns:
        Tuple of (frames, interval in milliseconds). Unknown names fall back
        to the default spinner.
    """
    try:
        spinner = Spinner(name)
    except KeyError:
        logger.warning(f"Unknown spinner '{name}', using '{DEFAULT_SPINNER}'")
        spinner = Spinner(DEFAULT_SPINNER)
    return list(spinner.frames), float(spinner.interval)


def stream_is_tty(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (ValueError, OSError):
        # Closed or detached streams
        return False


def color_enabled(stream, mode: str = "auto") -> bool:
    """
    Decide whether glyphs written to ``stream`` get ANSI colours.

    ``mode`` is one of "auto", "always" or "never". NO_COLOR and
    NESGRESS_NO_COLOR always win.
    """
    if mode == "never":
        return False
    if os.getenv("NO_COLOR") is not None or is_truthy_env(os.getenv("NESGRESS_NO_COLOR")):
        return False
    if mode == "always":
        return True
    return stream_is_tty(stream)


def paint(text: str, color: str, enabled: bool) -> str:
    if not enabled:
        return text
    return f"{color}{text}{Style.RESET_ALL}"


def success_mark(glyph: str, enabled: bool) -> str:
    return paint(glyph, Fore.GREEN, enabled)


def failure_mark(glyph: str, enabled: bool) -> str:
    return paint(glyph, Fore.RED, enabled)


def spinner_mark(frame: str, enabled: bool) -> str:
    return paint(frame, Fore.CYAN, enabled)
