from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from yaml2drawio.diagram_types import ParamMap
from yaml2drawio.providers.interface import ResourceDefinition
from yaml2drawio.schema.model import Element

FONT_STYLES = ("normal", "bold", "italic", "bold italic")
STROKE_STYLES = ("solid", "dashed", "dotted")


@dataclass(frozen=True)
class CoreResource:
    definition: ResourceDefinition
    validate: Callable[[ParamMap], None]
    generate: Callable[[ParamMap], Element]


def prop(kind: str, description: str, **extra) -> dict:
    """One JSON-schema property entry."""
    entry = {"type": kind, "description": description}
    entry.update(extra)
    return entry


__all__ = ["FONT_STYLES", "STROKE_STYLES", "CoreResource", "prop"]
