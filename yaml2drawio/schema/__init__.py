from .model import (
    Waypoint, Padding, ElementProperties, Style, merge_styles, NestingConfig, Element,
    Layer, PageProperties, Page,
    GridSettings, BackgroundSettings, DiagramProperties, Diagram, Metadata,
    TemplateRef, TemplateHiveRef, ProviderRef, DiagramDocument,
)
from .template import Dependency, Parameter, IconConfig, GroupConfig, Template
from .validation import validate_element, validate_page, validate_document

__all__ = [
    "Waypoint", "Padding", "ElementProperties", "Style", "merge_styles", "NestingConfig", "Element",
    "Layer", "PageProperties", "Page",
    "GridSettings", "BackgroundSettings", "DiagramProperties", "Diagram", "Metadata",
    "TemplateRef", "TemplateHiveRef", "ProviderRef", "DiagramDocument",
    "Dependency", "Parameter", "IconConfig", "GroupConfig", "Template",
    "validate_element", "validate_page", "validate_document",
]
