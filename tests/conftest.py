"""
Pytest configuration and fixtures for nesgress tests.
"""

import io
import pytest
from pathlib import Path
import sys

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from nesgress.core.display import ProgressDisplay


@pytest.fixture(autouse=True)
def clean_display_env(monkeypatch):
    """Keep developer environment settings out of the tests."""
    for name in ("NESGRESS_SPINNER", "NESGRESS_INTERVAL_MS", "NESGRESS_TIMING_THRESHOLD_MS",
                 "NESGRESS_NO_ANIM", "NESGRESS_NO_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def buf():
    """In-memory output stream."""
    return io.StringIO()


@pytest.fixture
def display(buf):
    """ProgressDisplay writing to ``buf``; always closed afterwards."""
    progress = ProgressDisplay(buf)
    yield progress
    progress.close()
