"""
Spinner animation loop.

RenderDriver owns at most one background thread at a time. The thread never
touches ProgressDisplay's lock; it renders under the driver's own lock, and
stop() flips the loop's stop event under that same lock before joining, so
no frame can land after stop() returns.
"""

import logging
import threading
from typing import List, Optional

from nesgress.core.operations import OperationRecord
from nesgress.utils.error_messages import log_write_error
from nesgress.utils.terminal import RESET_LINE, spinner_mark


logger = logging.getLogger(__name__)


class RenderDriver:
    """Redraws the current stack top in place on a fixed interval."""

    def __init__(self, writer, frames: List[str], interval_ms: float,
                 indent_width: int = 2, color: bool = False):
        """
        Args:
            writer: Synchronized sink the frames are written to
            frames: Spinner glyph frames
            interval_ms: Delay between frames
            indent_width: Spaces per nesting level
            color: Paint the spinner glyph
        """
        self.writer = writer
        self.frames = frames or ["-"]
        self.interval = max(interval_ms, 1.0) / 1000.0
        self.indent_width = indent_width
        self.color = color
        self.frames_rendered = 0

        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None
        self._stop_event: Optional[threading.Event] = None
        self._record: Optional[OperationRecord] = None
        self._frame_index = 0

    @property
    def is_armed(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive()

    @property
    def target(self) -> Optional[OperationRecord]:
        return self._record

    def format_frame(self, record: OperationRecord, frame: str) -> str:
        indent = " " * (self.indent_width * record.depth)
        return f"{RESET_LINE}{spinner_mark(frame, self.color)} {indent}{record.label}"

    def arm(self, record: OperationRecord):
        """
        Start animating ``record``, stopping any loop that is already live.

        The first frame is drawn before this returns.
        """
        self.stop()

        stop_event = threading.Event()
        with self._lock:
            self._record = record
            self._stop_event = stop_event
            self._frame_index = 0
            self._render_locked(stop_event)

        thread = threading.Thread(
            target=self._run,
            args=(stop_event,),
            name="nesgress-render",
            daemon=True,
        )
        self._thread = thread
        thread.start()
        logger.debug(f"Render driver armed at depth {record.depth}: {record.label}")

    def redraw(self):
        """Draw one frame right away, e.g. after the label changed."""
        with self._lock:
            if self._stop_event is not None:
                self._render_locked(self._stop_event)

    def stop(self):
        """
        Stop the live loop, if any, and wait for its thread to exit.

        Safe to call repeatedly.
        """
        thread = self._thread
        with self._lock:
            if self._stop_event is not None:
                self._stop_event.set()
            self._stop_event = None
            self._record = None
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        self._thread = None

    def _run(self, stop_event: threading.Event):
        while not stop_event.wait(self.interval):
            with self._lock:
                if not self._render_locked(stop_event):
                    return

    def _render_locked(self, stop_event: threading.Event) -> bool:
        """Write one frame. Caller holds self._lock. Returns False to end the loop."""
        if stop_event.is_set() or self._record is None:
            return False
        frame = self.frames[self._frame_index % len(self.frames)]
        try:
            self.writer.write(self.format_frame(self._record, frame))
        except (OSError, ValueError) as e:
            log_write_error("Spinner frame write failed", e)
            stop_event.set()
            return False
        self._frame_index += 1
        self.frames_rendered += 1
        return True
