#!/usr/bin/env python3
"""
Base type aliases for yaml2drawio.
"""

from typing import Any, Dict, List, Union

# ---------- Parameter values ----------
# Provider and template parameters arrive as loosely typed YAML/JSON values.
# Integers and floats are one numeric variant; see utils.values for coercion.
ScalarValue = Union[str, int, float, bool, None]
ParamValue = Union[str, int, float, bool, None, List[Any], Dict[str, Any]]
ParamMap = Dict[str, ParamValue]

# ---------- Style / XML values ----------
StyleMap = Dict[str, str]
XmlValue = Union[str, int, float, bool, None]
