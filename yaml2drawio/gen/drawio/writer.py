from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from lxml import etree

from yaml2drawio.app.config import DEFAULT_CONFIG, OutputConfig
from yaml2drawio.gen.drawio.model import Cell, DiagramPage, DrawioDocument, Geometry, GraphModel
from yaml2drawio.utils.xml import xml_text

logger = logging.getLogger(__name__)


def _set_optional(el: etree._Element, name: str, value: Optional[str]) -> None:
    if value:
        el.set(name, value)


class DrawioWriter:
    """Serialise a DrawioDocument as an ``mxfile`` XML document."""

    def __init__(self, config: Optional[OutputConfig] = None) -> None:
        self.config: OutputConfig = config if config is not None else DEFAULT_CONFIG.output

    def build(self, document: DrawioDocument) -> etree._Element:
        root = etree.Element("mxfile")
        root.set("host", document.host)
        root.set("modified", document.modified)
        root.set("agent", document.agent)
        root.set("etag", document.etag)
        root.set("version", document.version)
        root.set("type", document.type)
        for page in document.pages:
            root.append(self.page_element(page))
        return root

    def page_element(self, page: DiagramPage) -> etree._Element:
        diagram = etree.Element("diagram", id=page.id, name=page.name)
        diagram.append(self.model_element(page.model))
        return diagram

    def model_element(self, model: GraphModel) -> etree._Element:
        attrs: Dict[str, str] = {
            "dx": xml_text(model.dx),
            "dy": xml_text(model.dy),
            "grid": xml_text(model.grid),
            "gridSize": xml_text(model.grid_size),
            "guides": xml_text(model.guides),
            "tooltips": xml_text(model.tooltips),
            "connect": xml_text(model.connect),
            "arrows": xml_text(model.arrows),
            "fold": xml_text(model.fold),
            "page": xml_text(model.page),
            "pageScale": xml_text(model.page_scale),
            "pageWidth": xml_text(model.page_width),
            "pageHeight": xml_text(model.page_height),
        }
        el = etree.Element("mxGraphModel", attrib=attrs)
        _set_optional(el, "background", model.background)
        root = etree.SubElement(el, "root")
        for cell in model.cells:
            root.append(self.cell_element(cell))
        return el

    def cell_element(self, cell: Cell) -> etree._Element:
        el = etree.Element("mxCell", id=cell.id)
        _set_optional(el, "value", cell.value)
        _set_optional(el, "style", cell.style)
        _set_optional(el, "parent", cell.parent)
        _set_optional(el, "source", cell.source)
        _set_optional(el, "target", cell.target)
        if cell.edge:
            el.set("edge", "1")
        if cell.vertex:
            el.set("vertex", "1")
        if cell.geometry is not None:
            el.append(self.geometry_element(cell.geometry))
        return el

    @staticmethod
    def geometry_element(geometry: Geometry) -> etree._Element:
        el = etree.Element("mxGeometry")
        # zero coordinates are left to the editor's defaults
        for name in ("x", "y", "width", "height"):
            value = getattr(geometry, name)
            if value:
                el.set(name, xml_text(value))
        if geometry.relative:
            el.set("relative", "1")
        el.set("as", "geometry")
        if geometry.points:
            array = etree.SubElement(el, "Array")
            array.set("as", "points")
            for x, y in geometry.points:
                etree.SubElement(array, "mxPoint", x=xml_text(x), y=xml_text(y))
        return el

    def to_bytes(self, document: DrawioDocument) -> bytes:
        return etree.tostring(
            self.build(document),
            pretty_print=self.config.pretty_print,
            xml_declaration=True,
            encoding="UTF-8",
        )

    def write(self, document: DrawioDocument, path: str) -> None:
        tree = etree.ElementTree(self.build(document))
        tree.write(path, pretty_print=self.config.pretty_print, xml_declaration=True, encoding="UTF-8")
        logger.info("Wrote %d page(s) to %s", len(document.pages), Path(path).name)


__all__ = ["DrawioWriter"]
