from dataclasses import dataclass, field
from typing import Dict, Tuple

CellId = str
StyleString = str


@dataclass
class GraphModelDefaults:
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


@dataclass
class DrawioMetaModel:
    root_cell_id: CellId = "0"
    default_parent_id: CellId = "1"

    graph: GraphModelDefaults = field(default_factory=GraphModelDefaults)

    swimlane_style: StyleString = (
        "swimlane;fontStyle=0;childLayout=stackLayout;horizontal=1;startSize=30;"
        "horizontalStack=0;resizeParent=1;resizeParentMax=0;resizeLast=0;"
        "collapsible=1;marginBottom=0;"
    )
    group_style: StyleString = "group;container=1;collapsible=0"
    text_marker: StyleString = "text"

    connector_defaults: Tuple[Tuple[str, str], ...] = (
        ("edgeStyle", "orthogonalEdgeStyle"),
        ("html", "1"),
        ("jettySize", "auto"),
        ("orthogonalLoop", "1"),
    )

    # draw.io fontStyle bitmask
    font_style_bits: Dict[str, int] = field(default_factory=lambda: {
        "normal": 0,
        "bold": 1,
        "italic": 2,
        "underline": 4,
    })

    # relative anchor of each connector port on the cell bounds
    port_anchors: Dict[str, Tuple[float, float]] = field(default_factory=lambda: {
        "top": (0.5, 0.0),
        "right": (1.0, 0.5),
        "bottom": (0.5, 1.0),
        "left": (0.0, 0.5),
        "center": (0.5, 0.5),
    })

    def font_style_mask(self, value: str) -> str:
        """'bold italic' -> '3'. Numbers and unknown words pass through."""
        words = value.replace(",", " ").replace("+", " ").split()
        if not words or any(w.lower() not in self.font_style_bits for w in words):
            return value
        mask = 0
        for word in words:
            mask |= self.font_style_bits[word.lower()]
        return str(mask)
