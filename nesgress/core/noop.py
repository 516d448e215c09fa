"""
Progress display that does nothing.

Used when animations are disabled or the output is not a terminal.
"""

from typing import Optional

from nesgress.core.reporter import ProgressReporter


class NoopProgressDisplay(ProgressReporter):
    """Drop-in ProgressReporter that ignores every call."""

    def start(self, label: str) -> None:
        pass

    def update(self, label: str) -> None:
        pass

    def finish(self, label: str) -> None:
        pass

    def fail(self, label: str, err: Optional[BaseException] = None) -> None:
        pass

    def is_active(self) -> bool:
        return False

    def clear(self) -> None:
        pass

    def pause(self) -> None:
        pass

    def resume(self) -> None:
        pass

    def is_paused(self) -> bool:
        return False

    def start_persistent(self, label: str) -> None:
        pass

    def log_accomplishment(self, text: str) -> None:
        pass

    def finish_persistent(self, label: str) -> None:
        pass

    def fail_persistent(self, label: str, err: Optional[BaseException] = None) -> None:
        pass

    def close(self) -> None:
        pass
