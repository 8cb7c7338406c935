"""Typed access to environment variables, with a one-time ``.env`` load."""

from __future__ import annotations

import logging
import os
import re
import threading

from dotenv import load_dotenv

_log = logging.getLogger(__name__)

_load_lock = threading.Lock()
_loaded = False

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def load_env() -> None:
    """Load ``.env`` from the working directory once; existing variables win."""
    global _loaded
    with _load_lock:
        if _loaded:
            return
        _loaded = True
        if not os.path.isfile(".env"):
            _log.warning(
                "Could not load .env file, relying on system environment variables"
            )
            return
        try:
            load_dotenv(".env", override=False)
        except (OSError, UnicodeDecodeError):
            _log.warning(
                "Could not load .env file, relying on system environment variables"
            )


def _raw(key: str) -> str:
    load_env()
    return os.environ.get(key, "")


def get_env_string(key: str) -> str:
    """Return the variable's value, or an empty string when it is unset."""
    return _raw(key)


def get_env_int(key: str) -> int:
    """Return the variable as a 64-bit integer, or 0 if unset or invalid."""
    value = _raw(key)
    if not _INT_RE.fullmatch(value):
        return 0
    number = int(value)
    if not _INT64_MIN <= number <= _INT64_MAX:
        return 0
    return number


def get_env_bool(key: str) -> bool:
    """Return the variable as a boolean, or False if unset or unrecognised."""
    value = _raw(key)
    if value in _TRUE_VALUES:
        return True
    return False


def get_env_map(key: str) -> dict[str, str]:
    """Parse ``k1=v1,k2=v2`` into a dict; any malformed pair yields ``{}``."""
    value = _raw(key)
    if not value:
        return {}
    result: dict[str, str] = {}
    for pair in value.split(","):
        parts = pair.split("=")
        if len(parts) != 2:
            return {}
        name, item = parts
        result[name] = item
    return result


def get_env_array(key: str) -> list[str]:
    """Split the variable on commas, dropping empty items."""
    value = _raw(key)
    if not value:
        return []
    return [part for part in value.split(",") if part]