"""Tests for the spinner animation loop."""

import time

import pytest

from nesgress.core.driver import RenderDriver
from nesgress.core.operations import OperationRecord
from nesgress.core.writer import SafeStringBuffer


@pytest.fixture
def sink():
    return SafeStringBuffer()


@pytest.fixture
def driver(sink):
    render = RenderDriver(sink, ["a", "b", "c"], interval_ms=10, indent_width=2)
    yield render
    render.stop()


def test_arm_draws_first_frame_immediately(driver, sink):
    driver.arm(OperationRecord(label="Working", depth=0))

    assert sink.getvalue().endswith("a Working")
    assert driver.is_armed


def test_frames_cycle_and_are_indented_by_depth(driver, sink):
    driver.arm(OperationRecord(label="Nested", depth=2))
    time.sleep(0.08)
    driver.stop()

    output = sink.getvalue()
    assert "a     Nested" in output
    assert "b     Nested" in output
    assert driver.frames_rendered >= 2
    assert "\n" not in output


def test_stop_is_synchronous(driver, sink):
    driver.arm(OperationRecord(label="Working", depth=0))
    time.sleep(0.03)
    driver.stop()

    snapshot = sink.getvalue()
    rendered = driver.frames_rendered
    time.sleep(0.05)

    assert sink.getvalue() == snapshot
    assert driver.frames_rendered == rendered
    assert not driver.is_armed


def test_rearming_stops_previous_loop(driver):
    driver.arm(OperationRecord(label="First", depth=0))
    first_thread = driver._thread

    driver.arm(OperationRecord(label="Second", depth=1))

    assert not first_thread.is_alive()
    assert driver._thread is not first_thread
    assert driver.target.label == "Second"


def test_redraw_picks_up_label_change(driver, sink):
    record = OperationRecord(label="Before", depth=0)
    driver.arm(record)

    record.label = "After"
    driver.redraw()

    assert sink.getvalue().endswith("After")


def test_redraw_and_stop_without_arm_are_noops(driver, sink):
    driver.redraw()
    driver.stop()
    driver.stop()

    assert sink.getvalue() == ""
    assert driver.target is None


def test_write_error_ends_loop_without_raising():
    class BrokenStream:
        def write(self, text):
            raise OSError("terminal went away")

        def getvalue(self):
            return None

    render = RenderDriver(BrokenStream(), ["a"], interval_ms=10)
    render.arm(OperationRecord(label="Working", depth=0))
    time.sleep(0.03)

    assert not render.is_armed
    assert render.frames_rendered == 0
    render.stop()
