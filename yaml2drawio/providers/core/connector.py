from __future__ import annotations

from yaml2drawio.diagram_types import ElementType, ParamMap
from yaml2drawio.providers import params as p
from yaml2drawio.providers.core.base import STROKE_STYLES, CoreResource, prop
from yaml2drawio.providers.interface import ResourceDefinition, ResourceExample
from yaml2drawio.schema.model import Element, ElementProperties, Style

PORTS = ("top", "right", "bottom", "left", "center")
ARROWS = ("none", "source", "target", "both")

DEFINITION = ResourceDefinition(
    type="connector",
    name="Connector",
    description="Connection line between elements with arrows and styling",
    category="basic",
    schema={
        "type": "object",
        "properties": {
            "source": prop("string", "Source element ID"),
            "target": prop("string", "Target element ID"),
            "sourcePort": prop("string", "Source connection point", default="right", enum=list(PORTS)),
            "targetPort": prop("string", "Target connection point", default="left", enum=list(PORTS)),
            "label": prop("string", "Label for the connector", default=""),
            "strokeColor": prop("string", "Line color", default="#424242"),
            "strokeWidth": prop("number", "Line width", default=2, minimum=1),
            "strokeStyle": prop("string", "Line style", default="solid", enum=list(STROKE_STYLES)),
            "arrow": prop("string", "Arrow style", default="target", enum=list(ARROWS)),
        },
        "required": ["source", "target"],
    },
    examples=[
        ResourceExample(
            name="Basic Connection",
            description="Simple connector between two elements",
            config={"source": "element1", "target": "element2", "sourcePort": "right",
                    "targetPort": "left", "strokeColor": "#424242"},
        ),
        ResourceExample(
            name="Labeled Dashed Line",
            description="Dashed connector with label",
            config={"source": "start", "target": "end", "label": "Data Flow",
                    "strokeStyle": "dashed", "arrow": "target"},
        ),
    ],
)


def validate(params: ParamMap) -> None:
    p.require(params, "source", "source element ID is required")
    p.require(params, "target", "target element ID is required")
    p.check_choice(params, "sourcePort", PORTS, "invalid source port value")
    p.check_choice(params, "targetPort", PORTS, "invalid target port value")
    p.check_choice(params, "strokeStyle", STROKE_STYLES, "invalid stroke style")
    p.check_choice(params, "arrow", ARROWS, "invalid arrow style")
    p.check_min(params, "strokeWidth", 1, "stroke width must be at least 1")


def generate(params: ParamMap) -> Element:
    return Element(
        type=ElementType.CONNECTOR.value,
        properties=ElementProperties(
            source=p.get_str(params, "source"),
            target=p.get_str(params, "target"),
            source_port=p.get_str(params, "sourcePort", "right"),
            target_port=p.get_str(params, "targetPort", "left"),
            label=p.get_str(params, "label"),
            custom={
                "strokeStyle": p.get_str(params, "strokeStyle", "solid"),
                "arrow": p.get_str(params, "arrow", "target"),
            },
        ),
        style=Style(
            stroke_color=p.get_str(params, "strokeColor", "#424242"),
            stroke_width=p.get_float(params, "strokeWidth", 2),
        ),
    )


RESOURCE = CoreResource(DEFINITION, validate, generate)
