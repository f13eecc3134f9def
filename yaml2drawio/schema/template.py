#!/usr/bin/env python3
"""
Template definitions.

A Template is loaded once from its file and is read-only afterwards;
applying it copies its group configuration into the target element.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from yaml2drawio.diagram_types import ParamValue
from yaml2drawio.schema import fields as f
from yaml2drawio.schema.model import Element, ElementProperties, Padding, Style, elements_from_list


@dataclass
class Dependency:
    name: str = ""
    type: str = ""
    required: bool = False
    description: str = ""
    relationship: str = ""
    multiple: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Dependency":
        data = f.require_mapping(data, "dependencies")
        return cls(
            name=f.text(data, "name"),
            type=f.text(data, "type"),
            required=f.flag(data, "required"),
            description=f.text(data, "description"),
            relationship=f.text(data, "relationship"),
            multiple=f.flag(data, "multiple"),
        )


@dataclass
class Parameter:
    name: str = ""
    type: str = ""  # string, number, boolean, color
    default: ParamValue = None
    required: bool = False
    description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Parameter":
        data = f.require_mapping(data, "parameters")
        return cls(
            name=f.text(data, "name"),
            type=f.text(data, "type"),
            default=data.get("default"),
            required=f.flag(data, "required"),
            description=f.text(data, "description"),
        )


@dataclass
class IconConfig:
    type: str = ""  # "shape" or "image"
    shape: str = ""  # shape name or image path
    fill_color: str = ""
    stroke_color: str = ""
    position: str = ""
    size: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "IconConfig":
        return cls(
            type=f.text(data, "type"),
            shape=f.text(data, "shape"),
            fill_color=f.text(data, "fillColor"),
            stroke_color=f.text(data, "strokeColor"),
            position=f.text(data, "position"),
            size=f.number(data, "size"),
        )


@dataclass
class GroupConfig:
    properties: ElementProperties = field(default_factory=ElementProperties)
    style: Style = field(default_factory=Style)

    auto_resize: bool = False
    padding: Padding = field(default_factory=Padding)
    spacing: float = 0.0
    arrangement: str = ""

    icon: Optional[IconConfig] = None
    children: List[Element] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GroupConfig":
        icon = f.mapping(data, "icon")
        return cls(
            properties=ElementProperties.from_dict(f.mapping(data, "properties")),
            style=Style.from_dict(f.mapping(data, "style")),
            auto_resize=f.flag(data, "autoResize"),
            padding=Padding.from_dict(f.mapping(data, "padding")),
            spacing=f.number(data, "spacing"),
            arrangement=f.text(data, "arrangement"),
            icon=IconConfig.from_dict(icon) if icon else None,
            children=elements_from_list(f.sequence(data, "children")),
        )


@dataclass
class Template:
    name: str = ""
    description: str = ""
    version: str = ""
    dependencies: List[Dependency] = field(default_factory=list)
    parameters: List[Parameter] = field(default_factory=list)
    group: GroupConfig = field(default_factory=GroupConfig)

    def required_parameters(self) -> List[Parameter]:
        return [p for p in self.parameters if p.required]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Template":
        data = f.require_mapping(data, "template")
        return cls(
            name=f.text(data, "name"),
            description=f.text(data, "description"),
            version=f.text(data, "version"),
            dependencies=[Dependency.from_dict(d) for d in f.sequence(data, "dependencies")],
            parameters=[Parameter.from_dict(p) for p in f.sequence(data, "parameters")],
            group=GroupConfig.from_dict(f.mapping(data, "group")),
        )


__all__ = ["Dependency", "Parameter", "IconConfig", "GroupConfig", "Template"]
