"""Coercion helpers for loosely typed parameter values.

Integers and floats are treated as one numeric variant; booleans are never
numbers even though ``bool`` subclasses ``int``.
"""
from __future__ import annotations

from typing import Any


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def as_float(value: Any, default: float = 0.0) -> float:
    if is_number(value):
        return float(value)
    return default


def as_int(value: Any, default: int = 0) -> int:
    if is_number(value):
        return int(value)
    return default


def as_bool(value: Any, default: bool = False) -> bool:
    if isinstance(value, bool):
        return value
    return default


def as_str(value: Any, default: str = "") -> str:
    if isinstance(value, str):
        return value
    return default


def format_number(value: float) -> str:
    """120.0 -> '120', 12.5 -> '12.5'."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return format_number(value)
    return str(value)


__all__ = ["is_number", "as_float", "as_int", "as_bool", "as_str", "format_number", "to_text"]
