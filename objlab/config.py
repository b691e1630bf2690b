"""Configuration constants for the object lab."""

import os
from dataclasses import dataclass

# Version
VERSION = "0.3.1"

# Display
DEFAULT_JSON_INDENT = 2
DEFAULT_SINK = "console"
SUPPORTED_SINKS = ["console", "memory"]
DEFAULT_LOG_LEVEL = "WARNING"

# Score thresholds used by the array analysis
HIGH_SCORE = 90
LOW_SCORE = 80
PASSING_SCORE = 70
EXCEPTIONAL_SCORE = 95

# Defaults filled in when destructuring fields the student record lacks
DEFAULT_GRADUATION_YEAR = 2025
DEFAULT_GPA = 3.5


@dataclass
class LabConfig:
    sink: str = DEFAULT_SINK
    json_indent: int = DEFAULT_JSON_INDENT
    log_level: str = DEFAULT_LOG_LEVEL
    high_score: int = HIGH_SCORE
    low_score: int = LOW_SCORE
    passing_score: int = PASSING_SCORE
    exceptional_score: int = EXCEPTIONAL_SCORE


def get_default_config():
    """Return default configuration dict."""
    return {
        "sink": DEFAULT_SINK,
        "json_indent": DEFAULT_JSON_INDENT,
        "log_level": DEFAULT_LOG_LEVEL,
        "thresholds": {
            "high": HIGH_SCORE,
            "low": LOW_SCORE,
            "passing": PASSING_SCORE,
            "exceptional": EXCEPTIONAL_SCORE,
        },
    }


def load_config(environ=None) -> LabConfig:
    """Build a LabConfig from defaults overridden by OBJLAB_* environment variables.

    Environment variable overrides:
        OBJLAB_SINK=console|memory
        OBJLAB_JSON_INDENT=<int>
        OBJLAB_LOG_LEVEL=DEBUG|INFO|WARNING|ERROR
    """
    env = os.environ if environ is None else environ

    sink = env.get("OBJLAB_SINK", DEFAULT_SINK).strip().lower()
    if sink not in SUPPORTED_SINKS:
        raise ValueError(
            f"OBJLAB_SINK must be one of {SUPPORTED_SINKS}, got {sink!r}"
        )

    raw_indent = env.get("OBJLAB_JSON_INDENT")
    indent = DEFAULT_JSON_INDENT
    if raw_indent is not None:
        try:
            indent = int(raw_indent)
        except ValueError:
            raise ValueError(
                f"OBJLAB_JSON_INDENT must be an integer, got {raw_indent!r}"
            ) from None

    return LabConfig(
        sink=sink,
        json_indent=indent,
        log_level=env.get("OBJLAB_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
