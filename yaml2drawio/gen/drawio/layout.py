#!/usr/bin/env python3
"""
Nesting layout: positions the children of a container and optionally grows
the container to fit them.

Defaults are resolved on a copy of the element's NestingConfig, so the
authored configuration is left as written.
"""

from __future__ import annotations

import copy
import logging
import math
from typing import Dict, List, Optional

from yaml2drawio.app.config import LayoutConfig, DEFAULT_CONFIG
from yaml2drawio.diagram_types import Arrangement, ElementType, NestingMode
from yaml2drawio.schema.model import Element, NestingConfig, merge_styles

logger = logging.getLogger(__name__)

MODE_BY_TYPE: Dict[str, str] = {
    ElementType.CONTAINER.value: NestingMode.CONTAINER.value,
    ElementType.GROUP.value: NestingMode.GROUP.value,
    ElementType.SWIMLANE.value: NestingMode.SWIMLANE.value,
}


class NestingLayoutEngine:
    def __init__(self, config: Optional[LayoutConfig] = None) -> None:
        self.config: LayoutConfig = config if config is not None else DEFAULT_CONFIG.layout

    def resolve(self, element: Element) -> NestingConfig:
        """Copy of the element's nesting with every blank field defaulted."""
        nesting = copy.deepcopy(element.nesting)
        if not nesting.mode:
            nesting.mode = MODE_BY_TYPE.get(element.type, NestingMode.AUTOMATIC.value)
        if not nesting.arrangement:
            if len(element.children) <= self.config.horizontal_threshold:
                nesting.arrangement = Arrangement.HORIZONTAL.value
            else:
                nesting.arrangement = Arrangement.GRID.value
        if nesting.spacing == 0:
            nesting.spacing = self.config.default_spacing
        if nesting.padding.is_zero():
            nesting.padding = copy.copy(self.config.default_padding)
        return nesting

    def grid_columns(self, count: int) -> int:
        if count <= 0:
            return 0
        return min(self.config.max_grid_columns, math.ceil(math.sqrt(count)))

    def apply(self, element: Element) -> NestingConfig:
        """Lay out ``element.children`` in place and return the nesting used."""
        nesting = self.resolve(element)
        if not element.children:
            return nesting

        if nesting.child_defaults is not None:
            for child in element.children:
                apply_child_defaults(child, nesting.child_defaults)

        self.arrange(element.children, nesting)
        if nesting.auto_resize:
            self.auto_resize(element, nesting)
        logger.debug("Laid out %d children of %s (%s, mode=%s)",
                     len(element.children), element.display_name, nesting.arrangement, nesting.mode)
        return nesting

    def _default_size(self, child: Element) -> None:
        if child.properties.width == 0:
            child.properties.width = self.config.default_width
        if child.properties.height == 0:
            child.properties.height = self.config.default_height

    def arrange(self, children: List[Element], nesting: NestingConfig) -> None:
        arrangement = nesting.arrangement
        if arrangement == Arrangement.FREE.value:
            return

        left, top = nesting.padding.left, nesting.padding.top
        spacing = nesting.spacing

        if arrangement == Arrangement.VERTICAL.value:
            y = top
            for child in children:
                self._default_size(child)
                child.properties.x, child.properties.y = left, y
                y += child.properties.height + spacing

        elif arrangement == Arrangement.HORIZONTAL.value:
            x = left
            for child in children:
                self._default_size(child)
                child.properties.x, child.properties.y = x, top
                x += child.properties.width + spacing

        elif arrangement == Arrangement.GRID.value:
            columns = self.grid_columns(len(children))
            x, y, column = left, top, 0
            for child in children:
                self._default_size(child)
                child.properties.x, child.properties.y = x, y
                column += 1
                if column >= columns:
                    # next row starts below the last child of this one
                    column = 0
                    x = left
                    y += child.properties.height + spacing
                else:
                    x += child.properties.width + spacing

        else:
            logger.warning("Unknown arrangement %r, children left in place", arrangement)

    @staticmethod
    def auto_resize(parent: Element, nesting: NestingConfig) -> None:
        """Grow ``parent`` to cover its children plus right/bottom padding."""
        if not parent.children:
            return
        max_x = max(c.properties.x + c.properties.width for c in parent.children)
        max_y = max(c.properties.y + c.properties.height for c in parent.children)
        width = max_x + nesting.padding.right
        height = max_y + nesting.padding.bottom
        if width > parent.properties.width:
            parent.properties.width = width
        if height > parent.properties.height:
            parent.properties.height = height


def apply_child_defaults(child: Element, defaults: Element) -> None:
    """Fill unset size and style of ``child`` from ``defaults``."""
    if child.properties.width == 0:
        child.properties.width = defaults.properties.width
    if child.properties.height == 0:
        child.properties.height = defaults.properties.height
    if not child.type and defaults.type:
        child.type = defaults.type
    merge_styles(child.style, defaults.style)


__all__ = ["NestingLayoutEngine", "apply_child_defaults", "MODE_BY_TYPE"]
