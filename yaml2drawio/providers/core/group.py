from __future__ import annotations

from yaml2drawio.diagram_types import ElementType, ParamMap
from yaml2drawio.providers import params as p
from yaml2drawio.providers.core.base import FONT_STYLES, STROKE_STYLES, CoreResource, prop
from yaml2drawio.providers.interface import ResourceDefinition, ResourceExample
from yaml2drawio.schema.model import Element, ElementProperties, Style

DEFINITION = ResourceDefinition(
    type="group",
    name="Group",
    description="Container element that groups related elements together",
    category="container",
    schema={
        "type": "object",
        "properties": {
            "label": prop("string", "Group label", default=""),
            "x": prop("number", "X position", default=0),
            "y": prop("number", "Y position", default=0),
            "width": prop("number", "Width of the group", default=200, minimum=50),
            "height": prop("number", "Height of the group", default=150, minimum=50),
            "fillColor": prop("string", "Background color", default="#F5F5F5"),
            "strokeColor": prop("string", "Border color", default="#CCCCCC"),
            "strokeWidth": prop("number", "Border width", default=1, minimum=0),
            "strokeStyle": prop("string", "Border style", default="solid", enum=list(STROKE_STYLES)),
            "rounded": prop("boolean", "Enable rounded corners", default=False),
            "collapsible": prop("boolean", "Allow collapsing the group", default=False),
            "collapsed": prop("boolean", "Start collapsed", default=False),
            "fontSize": prop("number", "Font size", default=12, minimum=6, maximum=72),
            "fontStyle": prop("string", "Font style", default="bold", enum=list(FONT_STYLES)),
            "fontColor": prop("string", "Font color", default="#000000"),
        },
        "required": [],
    },
    examples=[
        ResourceExample(
            name="Simple Group",
            description="Basic group container",
            config={"label": "Process Group", "x": 100, "y": 100, "width": 250, "height": 200,
                    "fillColor": "#E8F5E8", "strokeColor": "#4CAF50"},
        ),
        ResourceExample(
            name="Collapsible Group",
            description="Group that can be collapsed",
            config={"label": "Advanced Settings", "x": 300, "y": 150, "width": 200, "height": 150,
                    "fillColor": "#FFF3E0", "strokeColor": "#FF9800", "strokeWidth": 2,
                    "rounded": True, "collapsible": True},
        ),
    ],
)


def validate(params: ParamMap) -> None:
    p.check_choice(params, "strokeStyle", STROKE_STYLES, "invalid stroke style")
    p.check_choice(params, "fontStyle", FONT_STYLES, "invalid font style")
    p.check_min(params, "width", 50, "width must be at least 50")
    p.check_min(params, "height", 50, "height must be at least 50")
    p.check_range(params, "fontSize", 6, 72, "font size must be between 6 and 72")
    p.check_min(params, "strokeWidth", 0, "stroke width cannot be negative")


def generate(params: ParamMap) -> Element:
    return Element(
        type=ElementType.GROUP.value,
        properties=ElementProperties(
            x=p.get_float(params, "x", 0),
            y=p.get_float(params, "y", 0),
            width=p.get_float(params, "width", 200),
            height=p.get_float(params, "height", 150),
            label=p.get_str(params, "label"),
            collapsible=p.get_bool(params, "collapsible", False),
            collapsed=p.get_bool(params, "collapsed", False),
        ),
        style=Style(
            fill_color=p.get_str(params, "fillColor", "#F5F5F5"),
            stroke_color=p.get_str(params, "strokeColor", "#CCCCCC"),
            stroke_width=p.get_float(params, "strokeWidth", 1),
            rounded=p.get_bool(params, "rounded", False),
            font_size=int(p.get_float(params, "fontSize", 12)),
            font_style=p.get_str(params, "fontStyle", "bold"),
            font_color=p.get_str(params, "fontColor", "#000000"),
            custom={"strokeStyle": p.get_str(params, "strokeStyle", "solid")},
        ),
    )


RESOURCE = CoreResource(DEFINITION, validate, generate)
