#!/usr/bin/env python3
"""
Cell generator: turns processed pages into draw.io cell graphs.

Each page-level element gets a hierarchical cell id: its own id (or name)
at the root and ``parent/child`` below it. The path is passed down the
recursion; element ids themselves are never rewritten.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from yaml2drawio.app.config import DEFAULT_CONFIG, GeneratorConfig
from yaml2drawio.diagram_types import CellId, ElementType
from yaml2drawio.errors import DiagramError, UnsupportedElementTypeError
from yaml2drawio.gen.drawio.layout import NestingLayoutEngine
from yaml2drawio.gen.drawio.model import Cell, DiagramPage, DrawioDocument, Geometry, GraphModel
from yaml2drawio.gen.drawio.styles import element_style, layer_style
from yaml2drawio.meta import DEFAULT_META, DrawioMetaModel
from yaml2drawio.schema.model import DiagramDocument, DiagramProperties, Element, Layer, Page
from yaml2drawio.schema.validation import validate_page
from yaml2drawio.utils.ids import hierarchical_id

logger = logging.getLogger(__name__)

CONTAINER_TYPES = (
    ElementType.SHAPE.value,
    ElementType.CONTAINER.value,
    ElementType.GROUP.value,
    ElementType.SWIMLANE.value,
)


class DrawioGenerator:
    def __init__(self, config: Optional[GeneratorConfig] = None, meta: Optional[DrawioMetaModel] = None) -> None:
        self.config: GeneratorConfig = config if config is not None else DEFAULT_CONFIG
        self.meta: DrawioMetaModel = meta if meta is not None else DEFAULT_META
        self.layout = NestingLayoutEngine(self.config.layout)

    # ===============================================
    # DOCUMENT AND PAGES
    # ===============================================

    def generate(self, document: DiagramDocument) -> DrawioDocument:
        output = self.config.output
        result = DrawioDocument(
            host=output.host,
            modified=document.metadata.modified,
            agent=output.agent,
            version=output.version,
            type=output.file_type,
        )
        for page in document.diagram.pages:
            validate_page(page)
            try:
                result.pages.append(self.generate_page(page, document.diagram.properties))
            except DiagramError as err:
                raise err.add_context(f"page {page.id}")
        return result

    def _graph_model(self, page: Page, props: Optional[DiagramProperties]) -> GraphModel:
        graph = self.meta.graph
        model = GraphModel(
            grid=graph.grid,
            grid_size=graph.grid_size,
            guides=graph.guides,
            tooltips=graph.tooltips,
            connect=graph.connect,
            arrows=graph.arrows,
            fold=graph.fold,
            page=graph.page,
            page_scale=graph.page_scale,
            page_width=graph.page_width,
            page_height=graph.page_height,
        )
        if props is not None:
            if props.grid.enabled is False:
                model.grid = 0
            elif props.grid.size > 0:
                model.grid_size = props.grid.size
            if props.scale > 0:
                model.page_scale = props.scale
            if props.background.color:
                model.background = props.background.color

        # page settings win over diagram settings
        if page.properties.width > 0:
            model.page_width = page.properties.width
        if page.properties.height > 0:
            model.page_height = page.properties.height
        if page.properties.background:
            model.background = page.properties.background
        return model

    def generate_page(self, page: Page, props: Optional[DiagramProperties] = None) -> DiagramPage:
        model = self._graph_model(page, props)
        cells = model.cells
        cells.append(Cell(id=CellId(self.meta.root_cell_id)))
        cells.append(Cell(id=CellId(self.meta.default_parent_id), parent=CellId(self.meta.root_cell_id)))

        for layer in page.layers:
            cells.append(self.layer_cell(layer))
            for element in layer.elements:
                try:
                    # ids rooted at the layer stay unique across layers
                    cells.extend(self.generate_element(element, CellId(layer.id), layer.id))
                except DiagramError as err:
                    raise err.add_context(f"element {element.display_name}").add_context(f"layer {layer.id}")

        for element in page.elements:
            try:
                cells.extend(self.generate_element(element, CellId(self.meta.default_parent_id)))
            except DiagramError as err:
                raise err.add_context(f"element {element.display_name}")

        logger.debug("Page %s: %d cells", page.id, len(cells))
        return DiagramPage(id=page.id, name=page.name, model=model)

    def layer_cell(self, layer: Layer) -> Cell:
        return Cell(
            id=CellId(layer.id),
            value=layer.name,
            parent=CellId(self.meta.default_parent_id),
            vertex=True,
            style=layer_style(layer),
        )

    # ===============================================
    # ELEMENTS
    # ===============================================

    def generate_element(self, element: Element, parent_id: CellId, parent_path: str = "") -> List[Cell]:
        """Cells for ``element`` and its subtree, parents first."""
        cell_id = hierarchical_id(element.id or element.name, parent_path)

        if element.children:
            self.layout.apply(element)

        kind = element.type
        if kind in (ElementType.SHAPE.value, ElementType.CONTAINER.value):
            cell = self.vertex_cell(element, cell_id, parent_id, element.properties.label or element.display_name)
        elif kind == ElementType.GROUP.value:
            cell = self.vertex_cell(element, cell_id, parent_id, element.properties.label or element.display_name,
                                    fallback_style=self.meta.group_style)
        elif kind == ElementType.SWIMLANE.value:
            cell = self.vertex_cell(element, cell_id, parent_id, element.properties.label or element.display_name,
                                    fallback_style=self.meta.swimlane_style)
        elif kind == ElementType.TEXT.value:
            cell = self.vertex_cell(element, cell_id, parent_id, element.properties.label)
        elif kind == ElementType.CONNECTOR.value:
            cell = self.edge_cell(element, cell_id, parent_id)
        else:
            raise UnsupportedElementTypeError(element.display_name, kind)

        cells = [cell]
        if kind in CONTAINER_TYPES:
            for child in element.children:
                try:
                    cells.extend(self.generate_element(child, cell_id, cell_id))
                except DiagramError as err:
                    raise err.add_context(f"child {child.display_name}")
        elif element.children:
            logger.warning("Children of %s element %s are not rendered", kind, element.display_name)
        return cells

    def vertex_cell(self, element: Element, cell_id: CellId, parent_id: CellId,
                    value: str, fallback_style: str = "") -> Cell:
        props = element.properties
        return Cell(
            id=cell_id,
            parent=parent_id,
            value=value,
            style=element_style(element, self.meta) or fallback_style,
            vertex=True,
            geometry=Geometry(x=props.x, y=props.y, width=props.width, height=props.height),
        )

    def edge_cell(self, element: Element, cell_id: CellId, parent_id: CellId) -> Cell:
        props = element.properties
        return Cell(
            id=cell_id,
            parent=parent_id,
            value=props.label,
            style=element_style(element, self.meta),
            edge=True,
            source=props.source,
            target=props.target,
            geometry=Geometry(relative=True, points=[(w.x, w.y) for w in props.waypoints]),
        )


__all__ = ["DrawioGenerator", "CONTAINER_TYPES"]
