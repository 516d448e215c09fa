"""
Chaos Testing Infrastructure

Fault injection for the output stream: writes that fail, writes that stall.
Each scenario checks that the display's state stays consistent and that
teardown still restores the terminal.
"""

from .fault_injectors import (
    FailingStream,
    SlowStream,
)

__all__ = [
    'FailingStream',
    'SlowStream',
]
