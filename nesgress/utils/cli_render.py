"""Pick the right progress display for the current terminal."""

from __future__ import annotations

import os
import sys
from typing import Literal, Optional, TextIO

from nesgress.core.config import DisplayConfig
from nesgress.core.display import ProgressDisplay
from nesgress.core.noop import NoopProgressDisplay
from nesgress.core.reporter import ProgressReporter
from nesgress.utils.terminal import is_truthy_env, stream_is_tty

AnimationMode = Literal["auto", "off", "always"]


def create_display(
    output: Optional[TextIO] = None,
    mode: AnimationMode = "auto",
    config: Optional[DisplayConfig] = None,
) -> ProgressReporter:
    """
    Return a progress display suitable for this output.

    Animations run only in interactive terminals outside CI unless forced
    with mode="always". NESGRESS_NO_ANIM disables them unconditionally.
    """
    if is_truthy_env(os.getenv("NESGRESS_NO_ANIM")):
        return NoopProgressDisplay()

    if mode == "off":
        return NoopProgressDisplay()

    stream = output if output is not None else sys.stdout

    if mode == "auto":
        if not stream_is_tty(stream) or is_truthy_env(os.getenv("CI")):
            return NoopProgressDisplay()

    return ProgressDisplay(stream, config=config)
