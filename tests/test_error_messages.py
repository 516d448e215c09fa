import logging

from nesgress.utils import error_messages as em


def test_format_success_without_timing_below_threshold():
    assert em.format_success("✓", "Done", elapsed_ms=99, threshold_ms=100) == "✓ Done\n"


def test_format_success_with_timing_at_threshold():
    assert em.format_success("✓", "Done", elapsed_ms=100, threshold_ms=100) == "✓ Done (took 100ms)\n"


def test_format_success_without_elapsed_is_accomplishment():
    assert em.format_success("✓", "Built container", indent="  ") == "  ✓ Built container\n"


def test_format_failure_appends_error_message():
    line = em.format_failure("✗", "Upload", OSError("connection reset"))
    assert line == "✗ Upload: connection reset\n"


def test_format_failure_without_error():
    assert em.format_failure("✗", "Upload", None, indent="    ") == "    ✗ Upload\n"


def test_describe_error_falls_back_to_class_name():
    assert em.describe_error(RuntimeError()) == "RuntimeError"
    assert em.describe_error(RuntimeError("  ")) == "RuntimeError"
    assert em.describe_error(None) == ""


def test_describe_error_strips_whitespace():
    assert em.describe_error(ValueError(" bad value \n")) == "bad value"


def test_log_write_error_logs_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="nesgress.utils.error_messages"):
        em.log_write_error("Frame write failed", OSError("broken pipe"))

    assert "Frame write failed: OSError: broken pipe" in caplog.text
