#!/usr/bin/env python3
"""
Diagram element enums and identifier types for yaml2drawio.
"""

from typing import NewType
from enum import Enum

# ---------- Identifier aliases ----------
CellId = NewType('CellId', str)
TemplateKey = NewType('TemplateKey', str)
HiveName = NewType('HiveName', str)


# ---------- Enums ----------
# str mixin: element types read from YAML stay plain strings so that an
# unknown type survives loading and is reported by the generator.
class ElementType(str, Enum):
    SHAPE = "shape"
    CONNECTOR = "connector"
    TEXT = "text"
    GROUP = "group"
    CONTAINER = "container"
    SWIMLANE = "swimlane"
    TEMPLATE = "template"


class NestingMode(str, Enum):
    CONTAINER = "container"
    GROUP = "group"
    SWIMLANE = "swimlane"
    AUTOMATIC = "automatic"
    CHILD = "child"


class Arrangement(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    GRID = "grid"
    FREE = "free"


class DependencyRelationship(str, Enum):
    PARENT = "parent"
    ANCESTOR = "ancestor"
    PEER = "peer"
    CHILD = "child"


class ProviderType(str, Enum):
    """Where a declared provider may be resolved from."""
    BUILTIN = "builtin"
    REGISTRY = "registry"
