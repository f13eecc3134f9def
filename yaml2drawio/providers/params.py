"""Typed reads and checks over provider parameter maps.

Readers fall back to the default when the key is absent or the value has
the wrong variant. Checks only look at values of the variant they
constrain, so a string ``width`` is left to the generator's default.
"""
from __future__ import annotations

from typing import Iterable

from yaml2drawio.diagram_types import ParamMap
from yaml2drawio.errors import ValidationError
from yaml2drawio.utils.values import as_bool, as_float, as_int, as_str, is_number


def get_str(params: ParamMap, key: str, default: str = "") -> str:
    return as_str(params.get(key), default)


def get_float(params: ParamMap, key: str, default: float = 0.0) -> float:
    return as_float(params.get(key), default)


def get_int(params: ParamMap, key: str, default: int = 0) -> int:
    return as_int(params.get(key), default)


def get_bool(params: ParamMap, key: str, default: bool = False) -> bool:
    return as_bool(params.get(key), default)


def require(params: ParamMap, key: str, message: str) -> None:
    value = params.get(key)
    if value is None or value == "":
        raise ValidationError(key, message, code="REQUIRED")


def check_choice(params: ParamMap, key: str, choices: Iterable[str], message: str, strict: bool = False) -> None:
    """``strict`` also rejects non-string values."""
    if key not in params:
        return
    value = params[key]
    if not isinstance(value, str):
        if strict:
            raise ValidationError(key, f"{key} must be a string", code="INVALID_TYPE")
        return
    if value not in choices:
        raise ValidationError(key, message)


def check_min(params: ParamMap, key: str, minimum: float, message: str) -> None:
    value = params.get(key)
    if is_number(value) and value < minimum:
        raise ValidationError(key, message, code="OUT_OF_RANGE")


def check_range(params: ParamMap, key: str, minimum: float, maximum: float, message: str) -> None:
    value = params.get(key)
    if is_number(value) and not (minimum <= value <= maximum):
        raise ValidationError(key, message, code="OUT_OF_RANGE")


__all__ = [
    "get_str", "get_float", "get_int", "get_bool",
    "require", "check_choice", "check_min", "check_range",
]
