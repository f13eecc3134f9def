from __future__ import annotations

from yaml2drawio.diagram_types import ElementType, ParamMap
from yaml2drawio.providers import params as p
from yaml2drawio.providers.core.base import FONT_STYLES, CoreResource, prop
from yaml2drawio.providers.interface import ResourceDefinition, ResourceExample
from yaml2drawio.schema.model import Element, ElementProperties, Style

TEXT_ALIGNS = ("left", "center", "right")
VERTICAL_ALIGNS = ("top", "middle", "bottom")

DEFINITION = ResourceDefinition(
    type="text",
    name="Text",
    description="Standalone text element for labels and annotations",
    category="basic",
    schema={
        "type": "object",
        "properties": {
            "label": prop("string", "Text content"),
            "x": prop("number", "X position", default=0),
            "y": prop("number", "Y position", default=0),
            "width": prop("number", "Width of the text box", default=100, minimum=10),
            "height": prop("number", "Height of the text box", default=30, minimum=10),
            "fontSize": prop("number", "Font size", default=12, minimum=6, maximum=72),
            "fontFamily": prop("string", "Font family", default="Arial"),
            "fontColor": prop("string", "Font color", default="#000000"),
            "fontStyle": prop("string", "Font style", default="normal", enum=list(FONT_STYLES)),
            "textAlign": prop("string", "Horizontal alignment", default="center", enum=list(TEXT_ALIGNS)),
            "verticalAlign": prop("string", "Vertical alignment", default="middle", enum=list(VERTICAL_ALIGNS)),
            "fillColor": prop("string", "Background color", default=""),
            "strokeColor": prop("string", "Border color", default=""),
            "strokeWidth": prop("number", "Border width", default=0, minimum=0),
        },
        "required": ["label"],
    },
    examples=[
        ResourceExample(
            name="Simple Text",
            description="Basic text label",
            config={"label": "Sample Text", "x": 100, "y": 50, "fontSize": 14, "fontColor": "#333333"},
        ),
        ResourceExample(
            name="Styled Text Box",
            description="Text with background and border",
            config={"label": "Important Note", "x": 200, "y": 100, "width": 150, "height": 40,
                    "fontSize": 16, "fontStyle": "bold", "textAlign": "center",
                    "fillColor": "#FFF3CD", "strokeColor": "#856404", "strokeWidth": 2},
        ),
    ],
)


def validate(params: ParamMap) -> None:
    p.require(params, "label", "label text is required")
    p.check_choice(params, "fontStyle", FONT_STYLES, "invalid font style")
    p.check_choice(params, "textAlign", TEXT_ALIGNS, "invalid text alignment")
    p.check_choice(params, "verticalAlign", VERTICAL_ALIGNS, "invalid vertical alignment")
    p.check_min(params, "width", 10, "width must be at least 10")
    p.check_min(params, "height", 10, "height must be at least 10")
    p.check_range(params, "fontSize", 6, 72, "font size must be between 6 and 72")
    p.check_min(params, "strokeWidth", 0, "stroke width cannot be negative")


def generate(params: ParamMap) -> Element:
    return Element(
        type=ElementType.TEXT.value,
        properties=ElementProperties(
            x=p.get_float(params, "x", 0),
            y=p.get_float(params, "y", 0),
            width=p.get_float(params, "width", 100),
            height=p.get_float(params, "height", 30),
            label=p.get_str(params, "label"),
        ),
        style=Style(
            font_size=int(p.get_float(params, "fontSize", 12)),
            font_family=p.get_str(params, "fontFamily", "Arial"),
            font_color=p.get_str(params, "fontColor", "#000000"),
            font_style=p.get_str(params, "fontStyle", "normal"),
            text_align=p.get_str(params, "textAlign", "center"),
            vertical_align=p.get_str(params, "verticalAlign", "middle"),
            fill_color=p.get_str(params, "fillColor"),
            stroke_color=p.get_str(params, "strokeColor"),
            stroke_width=p.get_float(params, "strokeWidth", 0),
        ),
    )


RESOURCE = CoreResource(DEFINITION, validate, generate)
