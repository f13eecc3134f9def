#!/usr/bin/env python3
"""
Template and provider application.

Walks every page depth-first, parents before children, and rewrites each
element that names a ``resource`` or a ``template``. The stack of template
keys applied above an element (nearest first) is threaded down the walk;
it drives hive-relative resolution and dependency checks.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Sequence, Tuple

from yaml2drawio.diagram_types import DependencyRelationship, ElementType, NestingMode
from yaml2drawio.errors import (
    DependencyUnsatisfiedError,
    DiagramError,
    MissingParameterError,
    StructuralInvariantError,
    TemplateNotFoundError,
)
from yaml2drawio.providers.registry import ProviderRegistry, split_resource_reference
from yaml2drawio.schema.model import DiagramDocument, Element, NestingConfig, Page, ProviderRef, merge_styles
from yaml2drawio.schema.template import Dependency, GroupConfig, IconConfig, Template
from yaml2drawio.templates.expressions import render
from yaml2drawio.templates.store import HIVE_SEPARATOR, TemplateStore
from yaml2drawio.utils.ids import synthetic_child_id
from yaml2drawio.utils.values import format_number

logger = logging.getLogger(__name__)

Ancestors = Tuple[str, ...]

# Used when neither the element nor the template parameters supply them
FALLBACK_VARIABLES: Dict[str, str] = {
    "fillColor": "#E3F2FD",
    "strokeColor": "#1976D2",
}

SUBSTITUTED_PROPERTIES = ("label", "value", "shape")
SUBSTITUTED_STYLES = (
    "fill_color", "stroke_color", "stroke_dash_array",
    "font_family", "font_color", "font_style",
    "text_align", "vertical_align", "label_position", "vertical_label_position",
)


class TemplateProcessor:
    def __init__(self, store: TemplateStore, registry: ProviderRegistry) -> None:
        self.store = store
        self.registry = registry
        self.provider_refs: Dict[str, ProviderRef] = {}

    # ===============================================
    # DOCUMENT WALK
    # ===============================================

    def load_provider_refs(self, refs: Sequence[ProviderRef]) -> None:
        for ref in refs:
            self.provider_refs[ref.name] = ref

    def process_document(self, document: DiagramDocument) -> None:
        """Load the document's declarations, then rewrite every page in place."""
        self.load_provider_refs(document.providers)
        self.store.load_hive_refs(document.template_hives)
        self.store.load_refs(document.templates)

        for page in document.diagram.pages:
            try:
                self.process_page(page)
            except DiagramError as err:
                raise err.add_context(f"page {page.id}")

    def process_page(self, page: Page) -> None:
        for layer in page.layers:
            try:
                self.process_elements(layer.elements, (), page_level=False)
            except DiagramError as err:
                raise err.add_context(f"layer {layer.id or layer.name}")
        self.process_elements(page.elements, (), page_level=True)

    def process_elements(self, elements: Sequence[Element], ancestors: Ancestors, page_level: bool = False) -> None:
        for index, element in enumerate(elements):
            try:
                self._check_identity(element, page_level)
                applied = self.process_element(element, ancestors)
                child_ancestors = (applied,) + ancestors if applied else ancestors
                self.process_elements(element.children, child_ancestors)
            except DiagramError as err:
                raise err.add_context(f"element {element.display_name or index}")

    @staticmethod
    def _check_identity(element: Element, page_level: bool) -> None:
        if page_level and not (element.id and element.name):
            raise StructuralInvariantError("page elements must have both 'id' and 'name' fields")
        if not element.id and not element.name:
            raise StructuralInvariantError("elements must have either 'id' or 'name' field")

    def process_element(self, element: Element, ancestors: Ancestors = ()) -> str:
        """Apply the element's resource or template.

        Returns the resolved template key, or '' when no template applied.
        """
        if element.resource:
            self.apply_resource(element)
            return ""
        if element.template:
            return self.apply_template(element, ancestors)
        return ""

    # ===============================================
    # PROVIDER RESOURCES
    # ===============================================

    def apply_resource(self, element: Element) -> None:
        provider_name, resource_type = split_resource_reference(element.resource)
        provider = self.registry.resolve(
            provider_name, self.provider_refs.get(provider_name), reference=element.resource,
        )
        try:
            provider.validate(resource_type, element.parameters)
            generated = provider.generate_template(resource_type, element.parameters)
        except DiagramError as err:
            raise err.add_context(f"resource {element.resource}")

        # identity stays with the authored element
        element.type = generated.type
        element.properties = generated.properties
        element.style = generated.style
        element.nesting = generated.nesting
        logger.debug("Applied resource %s (%s/%s) to %s",
                     element.resource, provider.name, resource_type, element.display_name)

    # ===============================================
    # TEMPLATES
    # ===============================================

    def apply_template(self, element: Element, ancestors: Ancestors = ()) -> str:
        hive = self.store.current_hive(ancestors)
        key = self.store.resolve(element.template, hive)
        template = self.store.get(key)
        if template is None:
            raise TemplateNotFoundError(element.template, key, element.display_name)
        logger.debug("Resolved template %s -> %s (hive=%s)", element.template, key, hive or "-")

        self.validate_dependencies(element, template, ancestors)

        variables = self.build_variables(element, template)
        element.type = ElementType.SHAPE.value
        try:
            self.apply_group_config(element, template.group, variables)
        except DiagramError as err:
            raise err.add_context(f"template {key}")
        return key

    def validate_dependencies(self, element: Element, template: Template, ancestors: Ancestors) -> None:
        for dependency in template.dependencies:
            if not dependency.required:
                continue
            if not self._dependency_satisfied(dependency, ancestors):
                raise DependencyUnsatisfiedError(
                    element.display_name, template.name, dependency.type,
                    dependency.relationship, ancestors,
                )

    @staticmethod
    def _dependency_satisfied(dependency: Dependency, ancestors: Ancestors) -> bool:
        def is_type(entry: str) -> bool:
            return entry == dependency.type or entry.endswith(HIVE_SEPARATOR + dependency.type)

        if dependency.relationship == DependencyRelationship.PARENT.value:
            return bool(ancestors) and is_type(ancestors[0])
        if dependency.relationship == DependencyRelationship.ANCESTOR.value:
            return any(is_type(entry) for entry in ancestors)
        logger.warning("Dependency relationship %r (%s) is not enforced",
                       dependency.relationship, dependency.type)
        return True

    def build_variables(self, element: Element, template: Template) -> Dict[str, Any]:
        props = element.properties
        variables: Dict[str, Any] = {
            "id": element.id,
            "name": element.name,
            "x": props.x,
            "y": props.y,
            "width": props.width,
            "height": props.height,
            "label": props.label,
        }
        variables.update(props.custom)
        for name, value in element.parameters.items():
            variables.setdefault(name, value)

        for parameter in template.parameters:
            if parameter.name not in variables and parameter.default is not None:
                variables[parameter.name] = parameter.default

        for name, value in FALLBACK_VARIABLES.items():
            variables.setdefault(name, value)

        for parameter in template.required_parameters():
            if parameter.name not in variables:
                raise MissingParameterError(template.name, parameter.name)
        return variables

    def apply_group_config(self, element: Element, group: GroupConfig, variables: Dict[str, Any]) -> None:
        """Merge ``group`` into ``element``; the element's own values win."""
        props, source = element.properties, group.properties
        if source.width > 0 and props.width == 0:
            props.width = source.width
        if source.height > 0 and props.height == 0:
            props.height = source.height
        if source.label and not props.label:
            props.label = source.label
        if source.shape and not props.shape:
            props.shape = source.shape
        for key, value in source.custom.items():
            props.custom.setdefault(key, copy.deepcopy(value))

        merge_styles(element.style, group.style)
        if group.icon is not None:
            self._apply_icon(element, group.icon)

        element.nesting = NestingConfig(
            mode=NestingMode.CHILD.value,
            auto_resize=group.auto_resize,
            padding=copy.copy(group.padding),
            spacing=group.spacing,
            arrangement=group.arrangement,
            child_defaults=element.nesting.child_defaults,
        )

        parent_id = element.id or element.name
        for index, literal in enumerate(group.children):
            child = literal.copy()
            if not child.id:
                child.id = synthetic_child_id(parent_id, index)
            try:
                substitute_variables(child, variables, recursive=True)
            except DiagramError as err:
                raise err.add_context(f"child {index}")
            element.children.append(child)

        substitute_variables(element, variables)

    @staticmethod
    def _apply_icon(element: Element, icon: IconConfig) -> None:
        if icon.type != "image":
            logger.warning("Icon type %r on %s is not rendered", icon.type, element.display_name)
            return
        size = format_number(icon.size) if icon.size > 0 else "24"
        custom = element.style.custom
        custom.setdefault("image", icon.shape)
        custom.setdefault("imageWidth", size)
        custom.setdefault("imageHeight", size)
        custom.setdefault("imageAlign", icon.position or "left")


def substitute_variables(element: Element, variables: Dict[str, Any], recursive: bool = False) -> None:
    """Render every substitutable string field of ``element``."""
    props, style = element.properties, element.style
    for name in SUBSTITUTED_PROPERTIES:
        value = getattr(props, name)
        if value:
            setattr(props, name, _render_field(name, value, variables))
    for name in SUBSTITUTED_STYLES:
        value = getattr(style, name)
        if value:
            setattr(style, name, _render_field(name, value, variables))
    for key, value in style.custom.items():
        style.custom[key] = _render_field(f"style.custom.{key}", value, variables)

    if recursive:
        for child in element.children:
            substitute_variables(child, variables, recursive=True)


def _render_field(name: str, value: str, variables: Dict[str, Any]) -> str:
    try:
        return render(value, variables)
    except DiagramError as err:
        raise err.add_context(name)


__all__ = ["TemplateProcessor", "substitute_variables", "FALLBACK_VARIABLES"]
