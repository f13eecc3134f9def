"""Output cell graph, one step above the XML.

Numbers stay numbers here; the writer formats them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from yaml2drawio.diagram_types import CellId


@dataclass
class Geometry:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    relative: bool = False
    points: List[Tuple[float, float]] = field(default_factory=list)


@dataclass
class Cell:
    id: CellId
    parent: Optional[CellId] = None
    value: Optional[str] = None
    style: Optional[str] = None
    vertex: bool = False
    edge: bool = False
    source: str = ""
    target: str = ""
    geometry: Optional[Geometry] = None


@dataclass
class GraphModel:
    dx: int = 0
    dy: int = 0
    grid: int = 1
    grid_size: int = 10
    guides: int = 1
    tooltips: int = 1
    connect: int = 1
    arrows: int = 1
    fold: int = 1
    page: int = 1
    page_scale: float = 1.0
    page_width: int = 827
    page_height: int = 1169
    background: str = ""
    cells: List[Cell] = field(default_factory=list)


@dataclass
class DiagramPage:
    id: str
    name: str
    model: GraphModel = field(default_factory=GraphModel)


@dataclass
class DrawioDocument:
    host: str = "app.diagrams.net"
    modified: str = ""
    agent: str = ""
    etag: str = ""
    version: str = ""
    type: str = "device"
    pages: List[DiagramPage] = field(default_factory=list)


__all__ = ["Geometry", "Cell", "GraphModel", "DiagramPage", "DrawioDocument"]
