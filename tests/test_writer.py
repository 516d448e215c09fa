"""Tests for the serialized output sinks."""

import io
import threading

from nesgress.core.writer import SafeStringBuffer, SynchronizedWriter, wrap_output


class RecordingStream:
    """Stream that flags overlapping write calls."""

    def __init__(self):
        self.chunks = []
        self.in_write = False
        self.overlaps = 0
        self.flushes = 0

    def write(self, text):
        if self.in_write:
            self.overlaps += 1
        self.in_write = True
        # Widen the window a concurrent writer would need
        for _ in range(200):
            pass
        self.chunks.append(text)
        self.in_write = False
        return len(text)

    def flush(self):
        self.flushes += 1


def _hammer(writer, count=200, workers=4):
    def worker(tag):
        for i in range(count):
            writer.write(f"[{tag}:{i}]")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def test_synchronized_writer_never_overlaps_writes():
    stream = RecordingStream()
    writer = SynchronizedWriter(stream)

    _hammer(writer)

    assert stream.overlaps == 0
    assert len(stream.chunks) == 800
    assert stream.flushes == 800


def test_synchronized_writer_returns_length_for_streams_returning_none():
    class NoneStream:
        def write(self, text):
            return None

    assert SynchronizedWriter(NoneStream()).write("abc") == 3


def test_synchronized_writer_isatty_handles_missing_and_closed_streams():
    class NoTty:
        def write(self, text):
            return len(text)

    class ClosedTty(NoTty):
        def isatty(self):
            raise ValueError("I/O operation on closed file")

    assert SynchronizedWriter(NoTty()).isatty() is False
    assert SynchronizedWriter(ClosedTty()).isatty() is False
    assert SynchronizedWriter(NoTty()).getvalue() is None


def test_safe_string_buffer_snapshot_contains_every_chunk_whole():
    sink = SafeStringBuffer()

    _hammer(sink)

    output = sink.getvalue()
    for tag in range(4):
        for i in range(200):
            assert output.count(f"[{tag}:{i}]") == 1


def test_safe_string_buffer_writes_into_callers_buffer():
    backing = io.StringIO()
    sink = SafeStringBuffer(backing)

    sink.write("hello")

    assert backing.getvalue() == "hello"
    assert sink.getvalue() == "hello"
    assert sink.isatty() is False


def test_wrap_output_picks_sink_by_stream_type():
    assert isinstance(wrap_output(io.StringIO()), SafeStringBuffer)
    assert isinstance(wrap_output(RecordingStream()), SynchronizedWriter)

    sink = SafeStringBuffer()
    assert wrap_output(sink) is sink
