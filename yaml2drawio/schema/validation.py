"""Structural checks on the element tree.

Page-level elements need both ``id`` and ``name``; every other element
needs at least one of them. Pages need both as well.
"""
from __future__ import annotations

from typing import Iterable

from yaml2drawio.errors import DiagramError, StructuralInvariantError, ValidationError
from yaml2drawio.schema.model import DiagramDocument, Element, Page


def validate_element(element: Element, page_level: bool = False) -> None:
    if page_level:
        if not element.id or not element.name:
            raise StructuralInvariantError(
                "page elements must have both 'id' and 'name' fields",
                element.display_name or None,
            )
    elif not element.id and not element.name:
        raise StructuralInvariantError("child elements must have either 'id' or 'name' field")

    for index, child in enumerate(element.children):
        try:
            validate_element(child, page_level=False)
        except DiagramError as err:
            raise err.add_context(f"element {element.display_name or index}")


def validate_elements(elements: Iterable[Element], page_level: bool) -> None:
    for element in elements:
        validate_element(element, page_level=page_level)


def validate_page(page: Page) -> None:
    if not page.id or not page.name:
        raise StructuralInvariantError("page must have both 'id' and 'name' fields", page.id or page.name or None)
    try:
        for layer in page.layers:
            try:
                validate_elements(layer.elements, page_level=False)
            except DiagramError as err:
                raise err.add_context(f"layer {layer.id or layer.name}")
        validate_elements(page.elements, page_level=True)
    except DiagramError as err:
        raise err.add_context(f"page {page.id}")


def validate_document(document: DiagramDocument) -> None:
    """Checks done right after loading, before any template is applied."""
    if not document.version:
        raise ValidationError("version", "version is required", code="REQUIRED")
    if not document.diagram.pages:
        raise ValidationError("diagram.pages", "at least one page is required", code="REQUIRED")

    seen = set()
    for index, page in enumerate(document.diagram.pages):
        if not page.id:
            raise ValidationError(f"diagram.pages[{index}].id", "page id is required", code="REQUIRED")
        if page.id in seen:
            raise StructuralInvariantError(f"duplicate page id: {page.id}")
        seen.add(page.id)


__all__ = ["validate_element", "validate_elements", "validate_page", "validate_document"]
