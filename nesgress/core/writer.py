"""
Serialized output sinks.

Every byte nesgress puts on the terminal goes through one of these, so a
spinner frame, a completion line and an accomplishment line never interleave.
"""

import io
import threading
from typing import Optional, TextIO


class SynchronizedWriter:
    """Wraps a text stream with a lock to prevent concurrent writes."""

    def __init__(self, stream: TextIO):
        self.stream = stream
        self._lock = threading.Lock()

    def write(self, text: str) -> int:
        with self._lock:
            count = self.stream.write(text)
            flush = getattr(self.stream, "flush", None)
            if flush is not None:
                flush()
            return count if count is not None else len(text)

    def flush(self):
        with self._lock:
            flush = getattr(self.stream, "flush", None)
            if flush is not None:
                flush()

    def isatty(self) -> bool:
        isatty = getattr(self.stream, "isatty", None)
        try:
            return bool(isatty()) if isatty is not None else False
        except (ValueError, OSError):
            return False

    def getvalue(self) -> Optional[str]:
        """Real terminals cannot be read back."""
        return None


class SafeStringBuffer:
    """
    In-memory sink with locked reads and writes.

    Used for io.StringIO outputs so tests (and callers capturing output) can
    take a consistent snapshot while the animation thread is still writing.
    """

    def __init__(self, buffer: Optional[io.StringIO] = None):
        self.buffer = buffer if buffer is not None else io.StringIO()
        self._lock = threading.Lock()

    def write(self, text: str) -> int:
        with self._lock:
            return self.buffer.write(text)

    def flush(self):
        pass

    def isatty(self) -> bool:
        return False

    def getvalue(self) -> str:
        """Return everything written so far."""
        with self._lock:
            return self.buffer.getvalue()


def wrap_output(stream: TextIO):
    """
    Pick the sink for an output stream.

    Args:
        stream: Destination stream; io.StringIO gets a readable sink

    Returns:
        SafeStringBuffer or SynchronizedWriter
    """
    if isinstance(stream, (SafeStringBuffer, SynchronizedWriter)):
        return stream
    if isinstance(stream, io.StringIO):
        return SafeStringBuffer(stream)
    return SynchronizedWriter(stream)
