"""
The progress reporting contract.

Code that reports progress should depend on ProgressReporter only, so the
real display and the no-op display are interchangeable.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Optional


class ProgressReporter(ABC):
    """Method set shared by ProgressDisplay and NoopProgressDisplay."""

    @abstractmethod
    def start(self, label: str) -> None:
        """Begin a (possibly nested) operation."""

    @abstractmethod
    def update(self, label: str) -> None:
        """Relabel the innermost operation."""

    @abstractmethod
    def finish(self, label: str) -> None:
        """Complete an operation successfully."""

    @abstractmethod
    def fail(self, label: str, err: Optional[BaseException] = None) -> None:
        """Complete an operation with an error."""

    @abstractmethod
    def is_active(self) -> bool:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def pause(self) -> None:
        """Stop animating and clear the line, e.g. before prompting."""

    @abstractmethod
    def resume(self) -> None:
        pass

    @abstractmethod
    def is_paused(self) -> bool:
        pass

    @abstractmethod
    def start_persistent(self, label: str) -> None:
        """Begin an operation that collects accomplishment lines."""

    @abstractmethod
    def log_accomplishment(self, text: str) -> None:
        pass

    @abstractmethod
    def finish_persistent(self, label: str) -> None:
        pass

    @abstractmethod
    def fail_persistent(self, label: str, err: Optional[BaseException] = None) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        """Tear down the display. Idempotent."""

    def get_output_safely(self) -> str:
        """Snapshot of everything written, when the output is in memory."""
        return ""

    @contextmanager
    def track(self, label: str):
        """
        Run a block as one operation.

        Finishes on normal exit; on an exception, fails with it and re-raises.
        """
        self.start(label)
        try:
            yield self
        except BaseException as e:
            self.fail(label, e)
            raise
        self.finish(label)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
