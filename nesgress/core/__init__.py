"""
nesgress Core Module
Operation stack, render driver and the progress display itself.
"""

from .config import DisplayConfig
from .display import ProgressDisplay
from .driver import RenderDriver
from .logger import setup_logging
from .noop import NoopProgressDisplay
from .operations import OperationRecord, OperationStack
from .reporter import ProgressReporter
from .writer import SafeStringBuffer, SynchronizedWriter

__all__ = [
    'DisplayConfig',
    'ProgressDisplay',
    'RenderDriver',
    'setup_logging',
    'NoopProgressDisplay',
    'OperationRecord',
    'OperationStack',
    'ProgressReporter',
    'SafeStringBuffer',
    'SynchronizedWriter',
]
