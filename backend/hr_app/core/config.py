"""
Centralized configuration module for application-wide settings.

Settings are read from environment variables (``.env`` is loaded by the
app factory through python-dotenv). Each getter logs values it cannot
interpret and falls back to a safe default.
"""

import logging
import os
import sys
from typing import Any, Dict

logger = logging.getLogger(__name__)

TRUTHY = ("true", "1", "yes", "on")
FALSY = ("false", "0", "no", "off")


def is_test_mode() -> bool:
    """Check if we're running in test mode (pytest/CI)."""
    testing_val = os.getenv("TESTING", "").lower().strip()
    if testing_val in TRUTHY:
        return True
    if "pytest" in sys.modules:
        return True
    return bool(os.getenv("PYTEST_CURRENT_TEST"))


def get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean flag from the environment.

    Truthy values: "true", "1", "yes", "on" (case-insensitive)
    Falsy values: "false", "0", "no", "off" (case-insensitive)
    Anything else logs a warning and returns ``default``.
    """
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default

    value = raw.strip().lower()
    if value in TRUTHY:
        return True
    if value in FALSY:
        return False

    logger.warning(
        f"Unrecognized boolean value for {name}, using default",
        extra={"context": {"name": name, "value": raw, "default": default}},
    )
    return default


def get_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(
            f"Invalid integer for {name}, using default",
            extra={"context": {"name": name, "value": raw, "default": default}},
        )
        return default


def get_log_level() -> str:
    level = os.getenv("LOG_LEVEL", "INFO").upper().strip()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        logger.warning(
            f"Invalid LOG_LEVEL '{level}', falling back to INFO",
            extra={"context": {"LOG_LEVEL": level}},
        )
        return "INFO"
    return level


def load_settings() -> Dict[str, Any]:
    """
    Build the Flask config mapping from the environment.

    Environment Variables:
        LOG_LEVEL: DEBUG/INFO/WARNING/ERROR/CRITICAL (default INFO)
        LOG_TO_FILE: write rotating JSON logs under ``logs/`` (default on, off in tests)
        LOG_JSON: JSON console output instead of coloured text (default off)
        RATE_LIMIT_ENABLED: enable Flask-Limiter (default on, off in tests)
        LIMITER_STORAGE_URI: limiter backend (default memory://)
        SEED_SAMPLE_DATA: load the demo employees at startup (default on, off in tests)
    """
    testing = is_test_mode()
    return {
        "TESTING": testing,
        "LOG_LEVEL": get_log_level(),
        "LOG_TO_FILE": get_bool_env("LOG_TO_FILE", not testing),
        "LOG_JSON": get_bool_env("LOG_JSON", False),
        "RATELIMIT_ENABLED": get_bool_env("RATE_LIMIT_ENABLED", not testing),
        "RATELIMIT_STORAGE_URI": os.getenv("LIMITER_STORAGE_URI", "memory://"),
        "SEED_SAMPLE_DATA": get_bool_env("SEED_SAMPLE_DATA", not testing),
    }


def get_port() -> int:
    return get_int_env("PORT", 5000)
