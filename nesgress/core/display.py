"""
Hierarchical progress display.

ProgressDisplay keeps a stack of nested operations and animates the innermost
one on a single terminal line. Completing an operation collapses its line
into a permanent success or failure line and moves the spinner back to the
enclosing operation.

Only one ProgressDisplay should drive a given terminal at a time: cursor
visibility is tracked per instance.
"""

import logging
import sys
import threading
from typing import List, Optional, TextIO

from nesgress.core.config import DisplayConfig
from nesgress.core.driver import RenderDriver
from nesgress.core.operations import OperationRecord, OperationStack
from nesgress.core.reporter import ProgressReporter
from nesgress.core.writer import wrap_output
from nesgress.utils.error_messages import format_failure, format_success, log_write_error
from nesgress.utils.terminal import (
    HIDE_CURSOR,
    RESET_LINE,
    SHOW_CURSOR,
    color_enabled,
    failure_mark,
    spinner_frames,
    success_mark,
)


logger = logging.getLogger(__name__)


class ProgressDisplay(ProgressReporter):
    """
    Thread-safe nested spinner display.

    Every public method takes the same lock, so stack changes and the lines
    they produce are never interleaved between callers. Calls that have
    nothing to act on (empty stack, unknown label, closed display) are
    silent no-ops. Errors from the output stream propagate after the state
    change has been committed.
    """

    def __init__(self, output: Optional[TextIO] = None, config: Optional[DisplayConfig] = None):
        """
        Initialize the display.

        Args:
            output: Stream to render to. Defaults to sys.stdout.
            config: Display settings. Defaults to DisplayConfig().
        """
        stream = output if output is not None else sys.stdout
        self.config = config if config is not None else DisplayConfig()
        self._writer = wrap_output(stream)
        self._color = color_enabled(stream, self.config.color)

        frames, interval_ms = spinner_frames(self.config.spinner)
        if self.config.interval_ms:
            interval_ms = self.config.interval_ms
        self._driver = RenderDriver(
            self._writer,
            frames,
            interval_ms,
            indent_width=self.config.indent_width,
            color=self._color,
        )

        self._stack = OperationStack()
        self._lock = threading.Lock()
        self._paused = False
        self._closed = False
        self._cursor_hidden = False

    # ------------------------------------------------------------------
    # Regular operations
    # ------------------------------------------------------------------

    def start(self, label: str) -> None:
        self._push(label, persistent=False)

    def update(self, label: str) -> None:
        """Relabel the innermost operation. No-op when nothing is running."""
        with self._lock:
            if self._closed or not self._stack.update_label(label):
                return
            if not self._paused:
                self._driver.redraw()

    def finish(self, label: str) -> None:
        """
        Complete the innermost operation named ``label``.

        When no running operation has that label, the innermost operation is
        completed and ``label`` is shown as its completion text. Finishing the
        same label twice therefore completes the enclosing operation on the
        second call, under the repeated label.
        """
        self._complete(label, persistent=False, failed=False)

    def fail(self, label: str, err: Optional[BaseException] = None) -> None:
        self._complete(label, persistent=False, failed=True, err=err)

    # ------------------------------------------------------------------
    # Persistent operations
    # ------------------------------------------------------------------

    def start_persistent(self, label: str) -> None:
        """Start an operation whose header keeps spinning while accomplishments are logged."""
        self._push(label, persistent=True)

    def log_accomplishment(self, text: str) -> None:
        """
        Print a permanent success line right away.

        The line is indented under the innermost persistent operation, if
        any, and the spinner is redrawn below it.
        """
        with self._lock:
            if self._closed:
                return
            header = self._stack.top_persistent()
            indent = ""
            if header is not None:
                header.log(text)
                indent = self._indent(header.depth + 1)

            self._driver.stop()
            try:
                self._writer.write(RESET_LINE + format_success(self._success_mark(), text, indent=indent))
            finally:
                self._arm_top()

    def finish_persistent(self, label: str) -> None:
        self._complete(label, persistent=True, failed=False)

    def fail_persistent(self, label: str, err: Optional[BaseException] = None) -> None:
        self._complete(label, persistent=True, failed=True, err=err)

    # ------------------------------------------------------------------
    # Display control
    # ------------------------------------------------------------------

    def pause(self) -> None:
        """Stop the spinner and clear its line so the caller can prompt."""
        with self._lock:
            if self._closed or self._paused:
                return
            self._paused = True
            self._driver.stop()
            logger.debug("Display paused")
            try:
                if self._stack:
                    self._writer.write(RESET_LINE)
            finally:
                self._show_cursor()

    def resume(self) -> None:
        """Restart the spinner on the innermost operation, if any."""
        with self._lock:
            if self._closed or not self._paused:
                return
            self._paused = False
            logger.debug("Display resumed")
            self._arm_top()

    def clear(self) -> None:
        """Drop every running operation without printing completion lines."""
        with self._lock:
            if self._closed:
                return
            self._driver.stop()
            dropped = self._stack.clear()
            if dropped:
                logger.debug(f"Cleared {dropped} running operation(s)")
            try:
                if dropped:
                    self._writer.write(RESET_LINE)
            finally:
                self._show_cursor()

    def close(self) -> None:
        """
        Stop animating, drop all operations and restore the cursor.

        Safe to call any number of times. Never raises.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._paused = False
            self._driver.stop()
            dropped = self._stack.clear()
            try:
                if dropped:
                    self._writer.write(RESET_LINE)
            except (OSError, ValueError) as e:
                log_write_error("Clearing line on close failed", e)
            self._show_cursor()
            logger.debug("Display closed")

    def is_active(self) -> bool:
        with self._lock:
            return not self._closed and bool(self._stack)

    def is_paused(self) -> bool:
        with self._lock:
            return self._paused

    def active_labels(self) -> List[str]:
        """Labels of running operations, outermost first."""
        with self._lock:
            return self._stack.labels()

    def get_output_safely(self) -> str:
        value = self._writer.getvalue()
        return value if value is not None else ""

    # ------------------------------------------------------------------
    # Internals (caller holds self._lock)
    # ------------------------------------------------------------------

    def _push(self, label: str, persistent: bool):
        with self._lock:
            if self._closed:
                return
            record = self._stack.push(label, persistent=persistent)
            logger.debug(f"Started {'persistent ' if persistent else ''}operation at depth {record.depth}: {label}")
            if not self._paused:
                self._arm(record)

    def _complete(self, label: str, persistent: bool, failed: bool,
                  err: Optional[BaseException] = None):
        with self._lock:
            if self._closed:
                return
            record = self._stack.pop(label, persistent=persistent)
            if record is None:
                record = self._stack.pop_top(persistent=persistent)
            if record is None:
                logger.debug(f"Nothing to complete for '{label}'")
                return

            self._driver.stop()
            indent = self._indent(record.depth)
            if failed:
                line = format_failure(failure_mark(self.config.failure_glyph, self._color), label, err, indent=indent)
            else:
                line = format_success(
                    self._success_mark(),
                    label,
                    elapsed_ms=record.elapsed_ms(),
                    threshold_ms=self.config.timing_threshold_ms,
                    indent=indent,
                )
            try:
                self._writer.write(RESET_LINE + line)
            finally:
                self._arm_top()

    def _arm_top(self):
        """Point the spinner at the current top, or stop it when nothing runs."""
        top = self._stack.top()
        if top is None:
            self._driver.stop()
            self._show_cursor()
            return
        if self._paused:
            return
        self._arm(top)

    def _arm(self, record: OperationRecord):
        self._hide_cursor()
        self._driver.arm(record)

    def _hide_cursor(self):
        if self._cursor_hidden:
            return
        try:
            self._writer.write(HIDE_CURSOR)
            self._cursor_hidden = True
        except (OSError, ValueError) as e:
            log_write_error("Hiding cursor failed", e)

    def _show_cursor(self):
        if not self._cursor_hidden:
            return
        try:
            self._writer.write(SHOW_CURSOR)
            self._cursor_hidden = False
        except (OSError, ValueError) as e:
            log_write_error("Restoring cursor failed", e)

    def _indent(self, depth: int) -> str:
        return " " * (self.config.indent_width * depth)

    def _success_mark(self) -> str:
        return success_mark(self.config.success_glyph, self._color)
