#!/usr/bin/env python3
"""
Types module for yaml2drawio.
Centralized type definitions organized by domain.
"""

from .base import (
    ScalarValue, ParamValue, ParamMap,
    StyleMap, XmlValue
)

from .drawio import (
    CellId, TemplateKey, HiveName,
    ElementType, NestingMode, Arrangement,
    DependencyRelationship, ProviderType
)

__all__ = [
    # Base types
    'ScalarValue', 'ParamValue', 'ParamMap', 'StyleMap', 'XmlValue',

    # Diagram types
    'CellId', 'TemplateKey', 'HiveName',
    'ElementType', 'NestingMode', 'Arrangement',
    'DependencyRelationship', 'ProviderType'
]
