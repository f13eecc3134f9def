from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from yaml2drawio.schema.model import Padding


@dataclass
class LayoutConfig:
    default_width: float = 140
    default_height: float = 60
    default_spacing: float = 20
    default_padding: Padding = field(default_factory=lambda: Padding(top=30, right=20, bottom=20, left=20))
    max_grid_columns: int = 4
    # up to this many children are laid out horizontally, more go to a grid
    horizontal_threshold: int = 4


@dataclass
class OutputConfig:
    pretty_print: bool = True
    host: str = "app.diagrams.net"
    agent: str = "yaml2drawio"
    version: str = "24.7.17"
    file_type: str = "device"
    extension: str = ".drawio"


@dataclass
class GeneratorConfig:
    # Inputs
    templates_dir: Optional[str] = None

    # Processing settings
    validate_only: bool = False
    verbose: bool = False

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


DEFAULT_CONFIG = GeneratorConfig()

__all__ = [
    "LayoutConfig",
    "OutputConfig",
    "GeneratorConfig",
    "DEFAULT_CONFIG",
]
