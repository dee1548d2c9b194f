"""
Environment value helpers.
"""

from __future__ import annotations


def sanitize_env_value(raw: str | None, fallback: str = "") -> str:
    value = (raw if raw is not None else fallback).strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        value = value[1:-1].strip()
    return value or fallback


def env_int(raw: str | None, fallback: int) -> int:
    """Parse an integer env value, falling back on blank or malformed input."""
    value = sanitize_env_value(raw)
    try:
        return int(value)
    except ValueError:
        return fallback
