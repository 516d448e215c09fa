"""
nesgress demo: nested, persistent and failing operations in the terminal.
"""

import logging
import sys
import time
from pathlib import Path

from nesgress.core.config import DisplayConfig
from nesgress.core.logger import setup_logging
from nesgress.core.reporter import ProgressReporter
from nesgress.utils.cli_render import create_display
from nesgress.utils.cli_runtime import build_demo_arg_parser, configure_windows_console_utf8


def run_nested(display: ProgressReporter, delay: float):
    display.start("Setting up environment")
    time.sleep(delay)

    display.start("Downloading dependencies")
    time.sleep(delay)
    display.update("Downloading dependencies (3/3)")
    time.sleep(delay)
    display.finish("Dependencies downloaded")

    with display.track("Compiling"):
        time.sleep(delay)

    display.finish("Setting up environment")


def run_persistent(display: ProgressReporter, delay: float):
    display.start_persistent("Deploying application")
    for step in ("Built container", "Pushed to registry", "Rolled out to cluster"):
        time.sleep(delay)
        display.log_accomplishment(step)
    display.finish_persistent("Deployment complete")


def run_failure(display: ProgressReporter, delay: float):
    display.start("Verifying checksums")
    time.sleep(delay)
    display.fail("Verifying checksums", ValueError("checksum mismatch in package.tar.gz"))


def run_prompt(display: ProgressReporter, delay: float):
    display.start("Waiting for confirmation")
    time.sleep(delay)
    display.pause()
    try:
        answer = input("Continue? [Y/n] ").strip().lower()
    except EOFError:
        answer = "y"
    display.resume()
    if answer in ("", "y", "yes"):
        display.finish("Confirmed")
    else:
        display.fail("Waiting for confirmation", RuntimeError("declined by user"))


SCENARIOS = {
    'nested': run_nested,
    'persistent': run_persistent,
    'failure': run_failure,
    'prompt': run_prompt,
}


def main(argv=None) -> int:
    """Run the selected demo scenarios."""
    configure_windows_console_utf8()
    args = build_demo_arg_parser().parse_args(argv)

    if args.log_folder:
        log_file = setup_logging(args.log_folder)
        logging.getLogger(__name__).info(f"Logging to {log_file}")

    config = DisplayConfig(Path(args.config) if args.config else None)
    if args.no_color:
        config.set('color', 'never')

    names = [name for name in SCENARIOS if name != 'prompt'] if args.scenario == 'all' else [args.scenario]

    display = create_display(mode=args.animations, config=config)
    try:
        for name in names:
            SCENARIOS[name](display, args.delay)
    except KeyboardInterrupt:
        display.clear()
        return 130
    finally:
        display.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
