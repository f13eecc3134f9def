from __future__ import annotations

from yaml2drawio.diagram_types import ElementType, ParamMap
from yaml2drawio.providers import params as p
from yaml2drawio.providers.core.base import FONT_STYLES, CoreResource, prop
from yaml2drawio.providers.interface import ResourceDefinition, ResourceExample
from yaml2drawio.schema.model import Element, ElementProperties, Style

SHAPE_KINDS = ("rectangle", "ellipse", "triangle", "diamond", "hexagon", "cloud", "cylinder")

DEFINITION = ResourceDefinition(
    type="shape",
    name="Shape Element",
    description="Basic shape element with customizable appearance and properties",
    category="basic",
    schema={
        "type": "object",
        "properties": {
            "label": prop("string", "Text label for the shape", default="Shape Element"),
            "shape": prop("string", "Shape type (rectangle, ellipse, triangle, diamond, etc.)",
                          default="rectangle", enum=list(SHAPE_KINDS)),
            "width": prop("number", "Width of the shape", default=120, minimum=10),
            "height": prop("number", "Height of the shape", default=80, minimum=10),
            "x": prop("number", "X position", default=100),
            "y": prop("number", "Y position", default=100),
            "fillColor": prop("string", "Fill color", default="#E3F2FD"),
            "strokeColor": prop("string", "Border color", default="#1976D2"),
            "strokeWidth": prop("number", "Border width", default=2, minimum=0),
            "fontSize": prop("number", "Font size", default=14, minimum=8),
            "fontStyle": prop("string", "Font style", default="normal", enum=list(FONT_STYLES)),
            "rounded": prop("boolean", "Enable rounded corners", default=True),
            "shadow": prop("boolean", "Enable shadow effect", default=False),
        },
        "required": ["label"],
    },
    examples=[
        ResourceExample(
            name="Basic Rectangle",
            description="Simple rectangular shape",
            config={"label": "Basic Shape", "shape": "rectangle", "fillColor": "#E3F2FD", "strokeColor": "#1976D2"},
        ),
        ResourceExample(
            name="Rounded Cloud",
            description="Cloud shape with rounded appearance",
            config={"label": "Cloud Service", "shape": "cloud", "fillColor": "#FFF3E0", "rounded": True, "shadow": True},
        ),
    ],
)


def validate(params: ParamMap) -> None:
    p.require(params, "label", "label is required")
    p.check_choice(params, "shape", SHAPE_KINDS, "invalid shape type", strict=True)
    p.check_min(params, "width", 10, "width must be at least 10")
    p.check_min(params, "height", 10, "height must be at least 10")


def generate(params: ParamMap) -> Element:
    return Element(
        type=ElementType.SHAPE.value,
        properties=ElementProperties(
            x=p.get_float(params, "x", 100),
            y=p.get_float(params, "y", 100),
            width=p.get_float(params, "width", 120),
            height=p.get_float(params, "height", 80),
            label=p.get_str(params, "label", "Shape Element"),
            shape=p.get_str(params, "shape", "rectangle"),
        ),
        style=Style(
            fill_color=p.get_str(params, "fillColor", "#E3F2FD"),
            stroke_color=p.get_str(params, "strokeColor", "#1976D2"),
            stroke_width=p.get_float(params, "strokeWidth", 2),
            font_size=p.get_int(params, "fontSize", 14),
            font_style=p.get_str(params, "fontStyle", "normal"),
            rounded=p.get_bool(params, "rounded", True),
            shadow=p.get_bool(params, "shadow", False),
        ),
    )


RESOURCE = CoreResource(DEFINITION, validate, generate)
