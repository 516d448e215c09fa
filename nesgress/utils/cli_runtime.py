"""CLI/runtime bootstrap helpers for the nesgress demo."""

from __future__ import annotations

import argparse
import sys
from typing import Any

import colorama


def configure_windows_console_utf8() -> None:
    """Best-effort UTF-8 and ANSI console setup for Windows terminals."""
    if sys.platform != "win32":
        return

    colorama.just_fix_windows_console()
    if hasattr(sys.stdout, "reconfigure"):
        stdout: Any = sys.stdout
        stderr: Any = sys.stderr
        try:
            stdout.reconfigure(encoding="utf-8")
            stderr.reconfigure(encoding="utf-8")
        except (OSError, ValueError):
            # Detached or redirected streams keep their encoding
            pass


def build_demo_arg_parser() -> argparse.ArgumentParser:
    """Create the nesgress-demo CLI parser."""
    parser = argparse.ArgumentParser(
        description="Show nested progress spinners in the terminal.",
        epilog="Examples:\n"
        "  nesgress-demo\n"
        "  nesgress-demo --scenario persistent --delay 0.5\n"
        "  nesgress-demo --animations always --no-color",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--scenario",
        choices=["nested", "persistent", "failure", "prompt", "all"],
        default="all",
        help="Which demo to run (default: all)",
    )
    parser.add_argument("--delay", type=float, default=0.4, help="Seconds of simulated work per step")
    parser.add_argument(
        "--animations",
        choices=["auto", "off", "always"],
        default="auto",
        help="Animation mode (default: auto; NESGRESS_NO_ANIM=1 disables).",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors (also respects NO_COLOR/NESGRESS_NO_COLOR).",
    )
    parser.add_argument("--config", "-c", help="Path to a JSON display config")
    parser.add_argument("--log-folder", help="Write a debug log to this folder")
    return parser
