from __future__ import annotations

from yaml2drawio.diagram_types import ElementType, ParamMap
from yaml2drawio.providers import params as p
from yaml2drawio.providers.core.base import FONT_STYLES, CoreResource, prop
from yaml2drawio.providers.interface import ResourceDefinition, ResourceExample
from yaml2drawio.schema.model import Element, ElementProperties, Style

ORIENTATIONS = ("horizontal", "vertical")
CHILD_LAYOUTS = ("stackLayout", "flowLayout", "freeLayout")

DEFINITION = ResourceDefinition(
    type="swimlane",
    name="Swimlane",
    description="Horizontal or vertical lane for organizing process flows",
    category="container",
    schema={
        "type": "object",
        "properties": {
            "label": prop("string", "Swimlane title", default=""),
            "x": prop("number", "X position", default=0),
            "y": prop("number", "Y position", default=0),
            "width": prop("number", "Width of the swimlane", default=300, minimum=100),
            "height": prop("number", "Height of the swimlane", default=200, minimum=50),
            "orientation": prop("string", "Lane orientation", default="horizontal", enum=list(ORIENTATIONS)),
            "startSize": prop("number", "Header size", default=30, minimum=20),
            "fillColor": prop("string", "Background color", default="#F8F9FA"),
            "strokeColor": prop("string", "Border color", default="#6C757D"),
            "strokeWidth": prop("number", "Border width", default=1, minimum=0),
            "collapsible": prop("boolean", "Allow collapsing the lane", default=True),
            "collapsed": prop("boolean", "Start collapsed", default=False),
            "fontSize": prop("number", "Font size", default=12, minimum=6, maximum=72),
            "fontStyle": prop("string", "Font style", default="bold", enum=list(FONT_STYLES)),
            "fontColor": prop("string", "Font color", default="#000000"),
            "childLayout": prop("string", "Layout of lane children", default="stackLayout", enum=list(CHILD_LAYOUTS)),
        },
        "required": [],
    },
    examples=[
        ResourceExample(
            name="Horizontal Swimlane",
            description="Basic horizontal swimlane for process flows",
            config={"label": "Customer Service", "x": 50, "y": 100, "width": 400, "height": 150,
                    "orientation": "horizontal", "startSize": 35,
                    "fillColor": "#E3F2FD", "strokeColor": "#1976D2"},
        ),
        ResourceExample(
            name="Vertical Swimlane",
            description="Vertical swimlane for role-based organization",
            config={"label": "Development Team", "x": 200, "y": 50, "width": 150, "height": 300,
                    "orientation": "vertical", "startSize": 40,
                    "fillColor": "#F3E5F5", "strokeColor": "#7B1FA2", "collapsible": True},
        ),
    ],
)


def validate(params: ParamMap) -> None:
    p.check_choice(params, "orientation", ORIENTATIONS, "invalid orientation")
    p.check_choice(params, "childLayout", CHILD_LAYOUTS, "invalid child layout")
    p.check_choice(params, "fontStyle", FONT_STYLES, "invalid font style")
    p.check_min(params, "width", 100, "width must be at least 100")
    p.check_min(params, "height", 50, "height must be at least 50")
    p.check_min(params, "startSize", 20, "start size must be at least 20")
    p.check_range(params, "fontSize", 6, 72, "font size must be between 6 and 72")
    p.check_min(params, "strokeWidth", 0, "stroke width cannot be negative")


def generate(params: ParamMap) -> Element:
    orientation = p.get_str(params, "orientation", "horizontal")
    return Element(
        type=ElementType.SWIMLANE.value,
        properties=ElementProperties(
            x=p.get_float(params, "x", 0),
            y=p.get_float(params, "y", 0),
            width=p.get_float(params, "width", 300),
            height=p.get_float(params, "height", 200),
            label=p.get_str(params, "label"),
            collapsible=p.get_bool(params, "collapsible", True),
            collapsed=p.get_bool(params, "collapsed", False),
            custom={
                "orientation": orientation,
                "startSize": p.get_float(params, "startSize", 30),
                "childLayout": p.get_str(params, "childLayout", "stackLayout"),
                "horizontal": orientation == "horizontal",
            },
        ),
        style=Style(
            fill_color=p.get_str(params, "fillColor", "#F8F9FA"),
            stroke_color=p.get_str(params, "strokeColor", "#6C757D"),
            stroke_width=p.get_float(params, "strokeWidth", 1),
            font_size=int(p.get_float(params, "fontSize", 12)),
            font_style=p.get_str(params, "fontStyle", "bold"),
            font_color=p.get_str(params, "fontColor", "#000000"),
        ),
    )


RESOURCE = CoreResource(DEFINITION, validate, generate)
