"""
Completion and failure line text.

All completion lines follow the pattern:
  ✓ [label] (took [N]ms)      success, timing only past the threshold
  ✗ [label]: [error message]  failure
  ✓ [text]                    accomplishment

Glyphs are passed in already painted; these helpers only build the text.
"""

import logging
from typing import Optional


def describe_error(err: Optional[BaseException]) -> str:
    """
    Turn the error handed to fail() into display text.

    Args:
        err: The exception describing why the tracked operation failed

    Returns:
        The exception message, or its class name when the message is empty
    """
    if err is None:
        return ""
    message = str(err).strip()
    if not message:
        return type(err).__name__
    return message


def format_timing(elapsed_ms: int, threshold_ms: int) -> str:
    """Return ' (took Nms)' when elapsed reaches the threshold, else ''."""
    if elapsed_ms < threshold_ms:
        return ""
    return f" (took {elapsed_ms}ms)"


def format_success(
    mark: str,
    label: str,
    elapsed_ms: Optional[int] = None,
    threshold_ms: int = 100,
    indent: str = ""
) -> str:
    """
    Format a success completion line, including the trailing newline.

    Args:
        mark: Success glyph (possibly coloured)
        label: Text shown after the glyph
        elapsed_ms: Elapsed time of the operation, None for accomplishments
        threshold_ms: Minimum elapsed time that gets a timing annotation
        indent: Leading indentation for nested records

    Returns:
        Formatted line
    """
    timing = format_timing(elapsed_ms, threshold_ms) if elapsed_ms is not None else ""
    return f"{indent}{mark} {label}{timing}\n"


def format_failure(mark: str, label: str, err: Optional[BaseException], indent: str = "") -> str:
    """Format a failure completion line, including the trailing newline."""
    reason = describe_error(err)
    if reason:
        return f"{indent}{mark} {label}: {reason}\n"
    return f"{indent}{mark} {label}\n"


def log_write_error(what_failed: str, error: BaseException):
    """
    Log a failed terminal write.

    Write failures are cosmetic; the caller decides whether to re-raise.
    """
    logging.getLogger(__name__).debug(f"{what_failed}: {type(error).__name__}: {error}")
