#!/usr/bin/env python3
"""
Diagram document model for yaml2drawio.

The tree mirrors the YAML input: a DiagramDocument owns a Diagram, the
Diagram owns Pages, a Page owns Layers and/or page-level Elements, and every
Element exclusively owns its ordered children. Template and provider
application mutates Elements in place; everything else is read-only once
loaded.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from yaml2drawio.diagram_types import ParamMap, StyleMap
from yaml2drawio.errors import DiagramError
from yaml2drawio.schema import fields as f


# ===============================================
# ELEMENT VALUE TYPES
# ===============================================

@dataclass
class Waypoint:
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Waypoint":
        data = f.require_mapping(data, "waypoint")
        return cls(x=f.number(data, "x"), y=f.number(data, "y"))


@dataclass
class Padding:
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    def is_zero(self) -> bool:
        return self.top == 0 and self.right == 0 and self.bottom == 0 and self.left == 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Padding":
        return cls(
            top=f.number(data, "top"),
            right=f.number(data, "right"),
            bottom=f.number(data, "bottom"),
            left=f.number(data, "left"),
        )


@dataclass
class ElementProperties:
    """Position, size, content and connector endpoints of an element."""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    z: int = 0

    label: str = ""
    value: str = ""

    shape: str = ""
    shape_type: str = ""

    source: str = ""
    target: str = ""
    source_port: str = ""
    target_port: str = ""
    waypoints: List[Waypoint] = field(default_factory=list)

    collapsible: bool = False
    collapsed: bool = False

    custom: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ElementProperties":
        return cls(
            x=f.number(data, "x"),
            y=f.number(data, "y"),
            width=f.number(data, "width"),
            height=f.number(data, "height"),
            z=f.integer(data, "z"),
            label=f.text(data, "label"),
            value=f.text(data, "value"),
            shape=f.text(data, "shape"),
            shape_type=f.text(data, "shapeType"),
            source=f.text(data, "source"),
            target=f.text(data, "target"),
            source_port=f.text(data, "sourcePort"),
            target_port=f.text(data, "targetPort"),
            waypoints=[Waypoint.from_dict(w) for w in f.sequence(data, "waypoints")],
            collapsible=f.flag(data, "collapsible"),
            collapsed=f.flag(data, "collapsed"),
            custom=f.mapping(data, "custom"),
        )


@dataclass
class Style:
    """Visual attributes. Empty strings and zeros mean "unset"."""
    fill_color: str = ""
    fill_opacity: float = 0.0

    stroke_color: str = ""
    stroke_width: float = 0.0
    stroke_opacity: float = 0.0
    stroke_dash_array: str = ""

    font_family: str = ""
    font_size: int = 0
    font_color: str = ""
    font_style: str = ""
    text_align: str = ""
    vertical_align: str = ""
    label_position: str = ""
    vertical_label_position: str = ""

    rounded: bool = False
    shadow: bool = False
    glass: bool = False
    sketch: bool = False
    rotation: float = 0.0

    custom: StyleMap = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Style":
        return cls(
            fill_color=f.text(data, "fillColor"),
            fill_opacity=f.number(data, "fillOpacity"),
            stroke_color=f.text(data, "strokeColor"),
            stroke_width=f.number(data, "strokeWidth"),
            stroke_opacity=f.number(data, "strokeOpacity"),
            stroke_dash_array=f.text(data, "strokeDashArray"),
            font_family=f.text(data, "fontFamily"),
            font_size=f.integer(data, "fontSize"),
            font_color=f.text(data, "fontColor"),
            font_style=f.text(data, "fontStyle"),
            text_align=f.text(data, "textAlign"),
            vertical_align=f.text(data, "verticalAlign"),
            label_position=f.text(data, "labelPosition"),
            vertical_label_position=f.text(data, "verticalLabelPosition"),
            rounded=f.flag(data, "rounded"),
            shadow=f.flag(data, "shadow"),
            glass=f.flag(data, "glass"),
            sketch=f.flag(data, "sketch"),
            rotation=f.number(data, "rotation"),
            custom=f.string_map(data, "custom"),
        )


def merge_styles(target: Style, source: Style) -> None:
    """Copy each unset field of ``target`` from ``source``."""
    for name in (
        "fill_color", "stroke_color", "stroke_dash_array",
        "font_family", "font_color", "font_style",
        "text_align", "vertical_align", "label_position", "vertical_label_position",
    ):
        if not getattr(target, name):
            setattr(target, name, getattr(source, name))

    for name in ("stroke_width", "font_size", "fill_opacity", "stroke_opacity"):
        if getattr(target, name) == 0 and getattr(source, name) > 0:
            setattr(target, name, getattr(source, name))
    if target.rotation == 0:
        target.rotation = source.rotation

    target.rounded = target.rounded or source.rounded
    target.shadow = target.shadow or source.shadow
    target.glass = target.glass or source.glass
    target.sketch = target.sketch or source.sketch

    for key, value in source.custom.items():
        target.custom.setdefault(key, value)


@dataclass
class NestingConfig:
    """Child layout policy. Blank fields are defaulted by the layout engine."""
    mode: str = ""
    auto_resize: bool = False
    padding: Padding = field(default_factory=Padding)
    spacing: float = 0.0
    arrangement: str = ""
    child_defaults: Optional["Element"] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NestingConfig":
        defaults = data.get("childDefaults")
        return cls(
            mode=f.text(data, "mode"),
            auto_resize=f.flag(data, "autoResize"),
            padding=Padding.from_dict(f.mapping(data, "padding")),
            spacing=f.number(data, "spacing"),
            arrangement=f.text(data, "arrangement"),
            child_defaults=Element.from_dict(defaults) if defaults is not None else None,
        )


# ===============================================
# ELEMENT TREE
# ===============================================

@dataclass
class Element:
    type: str = ""
    id: str = ""
    name: str = ""
    template: str = ""
    resource: str = ""
    parameters: ParamMap = field(default_factory=dict)
    properties: ElementProperties = field(default_factory=ElementProperties)
    style: Style = field(default_factory=Style)
    children: List["Element"] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    nesting: NestingConfig = field(default_factory=NestingConfig)

    @property
    def display_name(self) -> str:
        """Name if present, else id."""
        return self.name or self.id

    def copy(self) -> "Element":
        return copy.deepcopy(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Element":
        data = f.require_mapping(data, "element")
        children: List[Element] = []
        for index, child in enumerate(f.sequence(data, "children")):
            try:
                children.append(cls.from_dict(child))
            except DiagramError as err:
                raise err.add_context(f"child {index}")
        return cls(
            type=f.text(data, "type"),
            id=f.text(data, "id"),
            name=f.text(data, "name"),
            template=f.text(data, "template"),
            resource=f.text(data, "resource"),
            parameters=f.mapping(data, "parameters"),
            properties=ElementProperties.from_dict(f.mapping(data, "properties")),
            style=Style.from_dict(f.mapping(data, "style")),
            children=children,
            tags=f.string_list(data, "tags"),
            nesting=NestingConfig.from_dict(f.mapping(data, "nesting")),
        )


def elements_from_list(items: List[Any]) -> List[Element]:
    elements: List[Element] = []
    for index, item in enumerate(items):
        try:
            elements.append(Element.from_dict(item))
        except DiagramError as err:
            name = item.get("name") or item.get("id") if isinstance(item, Mapping) else None
            raise err.add_context(f"element {name or index}")
    return elements


# ===============================================
# PAGES AND LAYERS
# ===============================================

@dataclass
class Layer:
    id: str = ""
    name: str = ""
    visible: bool = True
    locked: bool = False
    elements: List[Element] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Layer":
        data = f.require_mapping(data, "layer")
        return cls(
            id=f.text(data, "id"),
            name=f.text(data, "name"),
            visible=f.flag(data, "visible", default=True),
            locked=f.flag(data, "locked"),
            elements=elements_from_list(f.sequence(data, "elements")),
        )


@dataclass
class PageProperties:
    width: int = 0
    height: int = 0
    background: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PageProperties":
        return cls(
            width=f.integer(data, "width"),
            height=f.integer(data, "height"),
            background=f.text(data, "background"),
        )


@dataclass
class Page:
    id: str = ""
    name: str = ""
    layers: List[Layer] = field(default_factory=list)
    elements: List[Element] = field(default_factory=list)
    properties: PageProperties = field(default_factory=PageProperties)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Page":
        data = f.require_mapping(data, "page")
        page_id = f.text(data, "id")
        try:
            return cls(
                id=page_id,
                name=f.text(data, "name"),
                layers=[Layer.from_dict(layer) for layer in f.sequence(data, "layers")],
                elements=elements_from_list(f.sequence(data, "elements")),
                properties=PageProperties.from_dict(f.mapping(data, "properties")),
            )
        except DiagramError as err:
            raise err.add_context(f"page {page_id}")


# ===============================================
# DIAGRAM
# ===============================================

@dataclass
class GridSettings:
    # None keeps the editor default (grid on)
    enabled: Optional[bool] = None
    size: int = 0
    color: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GridSettings":
        return cls(
            enabled=f.optional_flag(data, "enabled"),
            size=f.integer(data, "size"),
            color=f.text(data, "color"),
        )


@dataclass
class BackgroundSettings:
    color: str = ""
    image: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BackgroundSettings":
        return cls(color=f.text(data, "color"), image=f.text(data, "image"))


@dataclass
class DiagramProperties:
    grid: GridSettings = field(default_factory=GridSettings)
    background: BackgroundSettings = field(default_factory=BackgroundSettings)
    scale: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DiagramProperties":
        return cls(
            grid=GridSettings.from_dict(f.mapping(data, "grid")),
            background=BackgroundSettings.from_dict(f.mapping(data, "background")),
            scale=f.number(data, "scale"),
        )


@dataclass
class Diagram:
    pages: List[Page] = field(default_factory=list)
    properties: DiagramProperties = field(default_factory=DiagramProperties)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Diagram":
        return cls(
            pages=[Page.from_dict(p) for p in f.sequence(data, "pages")],
            properties=DiagramProperties.from_dict(f.mapping(data, "properties")),
        )


@dataclass
class Metadata:
    title: str = ""
    description: str = ""
    author: str = ""
    created: str = ""
    modified: str = ""
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Metadata":
        return cls(
            title=f.text(data, "title"),
            description=f.text(data, "description"),
            author=f.text(data, "author"),
            created=f.text(data, "created"),
            modified=f.text(data, "modified"),
            tags=f.string_list(data, "tags"),
        )


# ===============================================
# DOCUMENT-LEVEL REFERENCES
# ===============================================

@dataclass
class TemplateRef:
    """One template file; ``name`` overrides the name declared in the file."""
    name: str
    path: str = ""
    source: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TemplateRef":
        data = f.require_mapping(data, "templates")
        # "template" is accepted as an alias of "path"
        return cls(
            name=f.text(data, "name"),
            path=f.text(data, "path") or f.text(data, "template"),
            source=f.text(data, "source"),
        )


@dataclass
class TemplateHiveRef:
    name: str
    path: str = ""
    source: str = ""
    include: str = ""
    exclude: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TemplateHiveRef":
        data = f.require_mapping(data, "templateHives")
        return cls(
            name=f.text(data, "name"),
            path=f.text(data, "path"),
            source=f.text(data, "source"),
            include=f.text(data, "include"),
            exclude=f.text(data, "exclude"),
        )


@dataclass
class ProviderRef:
    name: str
    source: str = ""
    type: str = ""
    version: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProviderRef":
        data = f.require_mapping(data, "providers")
        return cls(
            name=f.text(data, "name"),
            source=f.text(data, "source"),
            type=f.text(data, "type"),
            version=f.text(data, "version"),
        )


@dataclass
class DiagramDocument:
    """Root of an input document."""
    version: str = ""
    metadata: Metadata = field(default_factory=Metadata)
    providers: List[ProviderRef] = field(default_factory=list)
    template_hives: List[TemplateHiveRef] = field(default_factory=list)
    templates: List[TemplateRef] = field(default_factory=list)
    diagram: Diagram = field(default_factory=Diagram)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DiagramDocument":
        data = f.require_mapping(data, "document")
        return cls(
            version=f.text(data, "version"),
            metadata=Metadata.from_dict(f.mapping(data, "metadata")),
            providers=[ProviderRef.from_dict(p) for p in f.sequence(data, "providers")],
            template_hives=[TemplateHiveRef.from_dict(h) for h in f.sequence(data, "templateHives")],
            templates=[TemplateRef.from_dict(t) for t in f.sequence(data, "templates")],
            diagram=Diagram.from_dict(f.mapping(data, "diagram")),
        )


__all__ = [
    "Waypoint", "Padding", "ElementProperties", "Style", "merge_styles", "NestingConfig",
    "Element", "elements_from_list",
    "Layer", "PageProperties", "Page",
    "GridSettings", "BackgroundSettings", "DiagramProperties", "Diagram", "Metadata",
    "TemplateRef", "TemplateHiveRef", "ProviderRef", "DiagramDocument",
]
