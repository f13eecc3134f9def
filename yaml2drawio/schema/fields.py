"""Field readers shared by the ``from_dict`` constructors.

Input documents use the camelCase keys of the YAML format. Readers raise
``ValidationError`` naming the offending key when a present value has the
wrong shape; absent keys fall back to the zero value.
"""
from __future__ import annotations

import datetime
from typing import Any, Dict, List, Mapping, Optional

from yaml2drawio.errors import ValidationError
from yaml2drawio.utils.values import is_number, to_text


def mapping(data: Any, key: str) -> Dict[str, Any]:
    value = data.get(key) if isinstance(data, Mapping) else None
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValidationError(key, "must be a mapping")
    return dict(value)


def sequence(data: Mapping[str, Any], key: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError(key, "must be a list")
    return value


def text(data: Mapping[str, Any], key: str, default: str = "") -> str:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if isinstance(value, (dict, list)):
        raise ValidationError(key, "must be a scalar value")
    return to_text(value)


def number(data: Mapping[str, Any], key: str, default: float = 0.0) -> float:
    value = data.get(key)
    if value is None:
        return default
    if not is_number(value):
        raise ValidationError(key, f"must be a number, got {value!r}")
    return float(value)


def integer(data: Mapping[str, Any], key: str, default: int = 0) -> int:
    return int(number(data, key, default))


def flag(data: Mapping[str, Any], key: str, default: bool = False) -> bool:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValidationError(key, f"must be a boolean, got {value!r}")
    return value


def optional_flag(data: Mapping[str, Any], key: str) -> Optional[bool]:
    if data.get(key) is None:
        return None
    return flag(data, key)


def string_map(data: Mapping[str, Any], key: str) -> Dict[str, str]:
    return {str(k): to_text(v) for k, v in mapping(data, key).items()}


def string_list(data: Mapping[str, Any], key: str) -> List[str]:
    return [to_text(v) for v in sequence(data, key)]


def require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValidationError(what, "must be a mapping")
    return data
