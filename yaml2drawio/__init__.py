"""yaml2drawio: YAML diagram definitions to draw.io XML."""

__version__ = "0.1.0"
