"""
nesgress: nested progress for the terminal.

Hierarchical spinner lines that collapse into success/failure lines,
a persistent mode for logging accomplishments under a running header,
and pause/resume for interactive prompts.

    display = ProgressDisplay()
    display.start("Installing packages")
    display.finish("Packages installed")
    display.close()
"""

from .core import (
    DisplayConfig,
    NoopProgressDisplay,
    OperationRecord,
    OperationStack,
    ProgressDisplay,
    ProgressReporter,
    RenderDriver,
    SafeStringBuffer,
    SynchronizedWriter,
)
from .utils.cli_render import create_display

__version__ = "1.0.0"

__all__ = [
    'DisplayConfig',
    'NoopProgressDisplay',
    'OperationRecord',
    'OperationStack',
    'ProgressDisplay',
    'ProgressReporter',
    'RenderDriver',
    'SafeStringBuffer',
    'SynchronizedWriter',
    'create_display',
]
