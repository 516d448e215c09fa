"""
Configuration management for nesgress.
Loads and validates display settings.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from rich.spinner import SPINNERS


class DisplayConfig:
    """Manages display configuration."""

    # Default configuration values
    DEFAULT_CONFIG = {
        'spinner': 'dots',
        'interval_ms': None,            # None = the spinner's own interval
        'timing_threshold_ms': 100,
        'indent_width': 2,
        'color': 'auto',
        'success_glyph': '✓',
        'failure_glyph': '✗',
    }

    COLOR_MODES = ('auto', 'always', 'never')

    def __init__(self, config_path: Optional[Path] = None, use_env: bool = True):
        """
        Initialize configuration.

        Args:
            config_path: Path to a JSON config file. If None, uses defaults.
            use_env: Apply NESGRESS_* environment overrides after the file
        """
        self.config = self.DEFAULT_CONFIG.copy()

        if config_path and Path(config_path).exists():
            self.load_config(Path(config_path))

        if use_env:
            self.apply_env()

    def load_config(self, config_path: Path):
        """Load configuration from JSON file."""
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                user_config = json.load(f)
        except json.JSONDecodeError as e:
            logging.warning(
                f"ERROR: Invalid JSON in config file\n"
                f"  Config file: {config_path.absolute()}\n"
                f"  Problem: {e}\n"
                f"  Line: {e.lineno}, Column: {e.colno}\n"
                f"Using default configuration."
            )
            return
        except OSError as e:
            logging.warning(
                f"ERROR: Could not load config file\n"
                f"  Config file: {config_path.absolute()}\n"
                f"  Problem: {e}\n"
                f"Using default configuration."
            )
            return

        if not isinstance(user_config, dict):
            logging.warning(f"Config file {config_path} must contain a JSON object; using defaults")
            return

        is_valid, errors = self._validate_config(user_config)
        if not is_valid:
            logging.warning(
                f"Configuration validation failed: {config_path.absolute()}\n"
                + "\n\n".join(errors)
                + "\nUsing default configuration instead."
            )
            return

        self.config.update(user_config)

    def apply_env(self):
        """Apply environment overrides, skipping values that fail validation."""
        overrides: Dict[str, Any] = {}

        spinner = os.getenv('NESGRESS_SPINNER')
        if spinner:
            overrides['spinner'] = spinner.strip()

        for env_name, field in (('NESGRESS_INTERVAL_MS', 'interval_ms'),
                                ('NESGRESS_TIMING_THRESHOLD_MS', 'timing_threshold_ms')):
            raw = os.getenv(env_name)
            if raw is None or not raw.strip():
                continue
            try:
                overrides[field] = int(raw)
            except ValueError:
                logging.warning(f"Ignoring {env_name}={raw!r}: expected an integer")

        for field, value in overrides.items():
            is_valid, errors = self._validate_config({field: value})
            if is_valid:
                self.config[field] = value
            else:
                logging.warning("\n".join(errors))

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self.config.get(key, default)

    def set(self, key: str, value: Any):
        """Set configuration value."""
        self.config[key] = value

    def _validate_config(self, config: Dict[str, Any]) -> Tuple[bool, List[str]]:
        """
        Validate configuration dictionary.

        Returns:
            Tuple of (is_valid, error_messages)
        """
        errors = []

        # Validate numeric ranges
        numeric_fields = {
            'interval_ms': (10, 1000, "Frame interval", 80),
            'timing_threshold_ms': (0, 600000, "Timing threshold", 100),
            'indent_width': (0, 16, "Indent width", 2),
        }

        for field, (min_val, max_val, display_name, example) in numeric_fields.items():
            if field not in config:
                continue
            value = config[field]
            if field == 'interval_ms' and value is None:
                continue
            if not isinstance(value, int) or isinstance(value, bool):
                errors.append(
                    f"ERROR: Invalid config value\n"
                    f"  Field: {field}\n"
                    f"  Value: {repr(value)} ({type(value).__name__})\n"
                    f"  Expected: number (integer)\n"
                    f"  Example: {example}\n"
                    f"  Valid range: {min_val} to {max_val}"
                )
            elif value < min_val or value > max_val:
                errors.append(
                    f"ERROR: Invalid config value\n"
                    f"  Field: {field}\n"
                    f"  Value: {value}\n"
                    f"  Expected: number between {min_val} and {max_val}\n"
                    f"  Example: {example}"
                )

        if 'spinner' in config:
            spinner = config['spinner']
            if not isinstance(spinner, str) or spinner not in SPINNERS:
                errors.append(
                    f"ERROR: Invalid config value\n"
                    f"  Field: spinner\n"
                    f"  Value: {repr(spinner)}\n"
                    f"  Expected: a rich spinner name\n"
                    f"  Example: dots"
                )

        if 'color' in config and config['color'] not in self.COLOR_MODES:
            errors.append(
                f"ERROR: Invalid config value\n"
                f"  Field: color\n"
                f"  Value: {repr(config['color'])}\n"
                f"  Expected: one of {', '.join(self.COLOR_MODES)}"
            )

        for field in ('success_glyph', 'failure_glyph'):
            if field in config:
                glyph = config[field]
                if not isinstance(glyph, str) or not glyph.strip() or '\n' in glyph:
                    errors.append(f"{field} must be a non-empty single-line string, got {repr(glyph)}")

        return (len(errors) == 0, errors)

    @property
    def spinner(self) -> str:
        """Get rich spinner name."""
        return self.config['spinner']

    @property
    def interval_ms(self) -> Optional[int]:
        """Get frame interval override in milliseconds."""
        return self.config.get('interval_ms')

    @property
    def timing_threshold_ms(self) -> int:
        """Get minimum elapsed time that is annotated on success lines."""
        return self.config['timing_threshold_ms']

    @property
    def indent_width(self) -> int:
        """Get spaces per nesting level."""
        return self.config['indent_width']

    @property
    def color(self) -> str:
        return self.config['color']

    @property
    def success_glyph(self) -> str:
        return self.config['success_glyph']

    @property
    def failure_glyph(self) -> str:
        return self.config['failure_glyph']
