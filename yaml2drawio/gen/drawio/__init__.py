from .model import Geometry, Cell, GraphModel, DiagramPage, DrawioDocument
from .layout import NestingLayoutEngine
from .styles import element_style, layer_style, style_tokens, contains_style
from .generator import DrawioGenerator
from .writer import DrawioWriter

__all__ = [
    "Geometry",
    "Cell",
    "GraphModel",
    "DiagramPage",
    "DrawioDocument",
    "NestingLayoutEngine",
    "element_style",
    "layer_style",
    "style_tokens",
    "contains_style",
    "DrawioGenerator",
    "DrawioWriter",
]
