#!/usr/bin/env python3
"""
Unit tests for template and provider application:
- element values win over template values
- parent / ancestor dependencies
- required parameters and variable sources
- literal template children
- provider resources and their failure modes
"""

from __future__ import annotations

from typing import List

import pytest

from yaml2drawio.errors import (
    DependencyUnsatisfiedError,
    MissingParameterError,
    ProviderError,
    ProviderNotFoundError,
    StructuralInvariantError,
    TemplateNotFoundError,
    ValidationError,
)
from yaml2drawio.providers import ProviderRegistry, register_builtin_providers
from yaml2drawio.providers.core import CoreProvider
from yaml2drawio.schema.model import DiagramDocument, Element, Page, ProviderRef
from yaml2drawio.schema.template import Template
from yaml2drawio.templates.processor import TemplateProcessor
from yaml2drawio.templates.store import TemplateStore


def _processor(**templates: dict) -> TemplateProcessor:
    store = TemplateStore()
    for key, data in templates.items():
        store.add(key, Template.from_dict(data))
    registry = ProviderRegistry()
    register_builtin_providers(registry)
    return TemplateProcessor(store, registry)


def _page(elements: List[dict]) -> Page:
    return Page.from_dict({"id": "p1", "name": "Page", "elements": elements})


SERVICE = {
    "name": "service",
    "parameters": [{"name": "port", "default": 8080}],
    "group": {
        "properties": {"width": 160, "height": 90, "label": "{{.name}}:{{.port}}"},
        "style": {"fillColor": "#000000", "strokeColor": "{{.strokeColor}}", "rounded": True},
    },
}


class TestTemplates:
    def test_group_config_applied(self):
        page = _page([{"id": "api", "name": "api", "template": "service"}])
        _processor(service=SERVICE).process_page(page)
        element = page.elements[0]
        assert element.type == "shape"
        assert (element.properties.width, element.properties.height) == (160, 90)
        assert element.properties.label == "api:8080"
        assert element.style.fill_color == "#000000"
        assert element.style.stroke_color == "#1976D2"
        assert element.style.rounded is True
        assert element.nesting.mode == "child"

    def test_element_values_win(self):
        page = _page([{
            "id": "api", "name": "api", "template": "service",
            "properties": {"width": 300, "label": "Gateway"},
            "style": {"fillColor": "#FFFFFF"},
        }])
        _processor(service=SERVICE).process_page(page)
        element = page.elements[0]
        assert element.style.fill_color == "#FFFFFF"
        assert element.properties.width == 300
        assert element.properties.height == 90
        assert element.properties.label == "Gateway"

    def test_custom_properties_and_parameters_feed_variables(self):
        page = _page([
            {"id": "a", "name": "a", "template": "service", "properties": {"custom": {"port": 443}}},
            {"id": "b", "name": "b", "template": "service", "parameters": {"port": 22}},
        ])
        _processor(service=SERVICE).process_page(page)
        assert page.elements[0].properties.label == "a:443"
        assert page.elements[1].properties.label == "b:22"

    def test_missing_required_parameter(self):
        template = {"name": "db", "parameters": [{"name": "engine", "required": True}]}
        page = _page([{"id": "d", "name": "d", "template": "db"}])
        with pytest.raises(MissingParameterError) as exc:
            _processor(db=template).process_page(page)
        assert exc.value.parameter == "engine"
        assert str(exc.value).startswith("element d: ")

    def test_unknown_template(self):
        page = _page([{"id": "x", "name": "x", "template": "ghost"}])
        with pytest.raises(TemplateNotFoundError):
            _processor().process_page(page)

    def test_literal_children_get_ids_and_substitution(self):
        template = {
            "name": "card",
            "group": {
                "children": [
                    {"name": "title", "type": "text", "properties": {"label": "{{.name}} title"}},
                    {"id": "fixed", "type": "shape"},
                ],
            },
        }
        page = _page([{"id": "c1", "name": "Card", "template": "card"}])
        _processor(card=template).process_page(page)
        children = page.elements[0].children
        assert [c.id for c in children] == ["c1-0", "fixed"]
        assert children[0].properties.label == "Card title"

    def test_literal_children_are_copies(self):
        template = {"name": "card", "group": {"children": [{"name": "title", "type": "text"}]}}
        processor = _processor(card=template)
        page = _page([
            {"id": "a", "name": "a", "template": "card"},
            {"id": "b", "name": "b", "template": "card"},
        ])
        processor.process_page(page)
        assert page.elements[0].children[0].id == "a-0"
        assert page.elements[1].children[0].id == "b-0"
        assert processor.store.get("card").group.children[0].id == ""

    def test_image_icon(self):
        template = {"name": "svc", "group": {"icon": {"type": "image", "shape": "icons/db.svg", "size": 32}}}
        page = _page([{"id": "s", "name": "s", "template": "svc"}])
        _processor(svc=template).process_page(page)
        custom = page.elements[0].style.custom
        assert custom["image"] == "icons/db.svg"
        assert custom["imageWidth"] == "32"
        assert custom["imageAlign"] == "left"


class TestDependencies:
    TEMPLATES = {
        "vpc": {"name": "vpc"},
        "subnet": {"name": "subnet", "dependencies": [
            {"name": "net", "type": "vpc", "required": True, "relationship": "parent"},
        ]},
        "instance": {"name": "instance", "dependencies": [
            {"name": "net", "type": "vpc", "required": True, "relationship": "ancestor"},
        ]},
    }

    def test_parent_satisfied(self):
        page = _page([{
            "id": "v", "name": "v", "template": "vpc",
            "children": [{"id": "s", "template": "subnet"}],
        }])
        _processor(**self.TEMPLATES).process_page(page)
        assert page.elements[0].children[0].type == "shape"

    def test_parent_missing(self):
        page = _page([{"id": "s", "name": "s", "template": "subnet"}])
        with pytest.raises(DependencyUnsatisfiedError) as exc:
            _processor(**self.TEMPLATES).process_page(page)
        assert exc.value.required_type == "vpc"
        assert exc.value.ancestors == []

    def test_parent_must_be_nearest(self):
        page = _page([{
            "id": "v", "name": "v", "template": "vpc",
            "children": [{"id": "mid", "type": "container", "template": "instance",
                          "children": [{"id": "s", "template": "subnet"}]}],
        }])
        with pytest.raises(DependencyUnsatisfiedError):
            _processor(**self.TEMPLATES).process_page(page)

    def test_ancestor_satisfied_through_plain_containers(self):
        page = _page([{
            "id": "v", "name": "v", "template": "vpc",
            "children": [{"id": "box", "type": "container",
                          "children": [{"id": "i", "template": "instance"}]}],
        }])
        _processor(**self.TEMPLATES).process_page(page)

    def test_hive_qualified_ancestor_matches_type(self):
        store = TemplateStore()
        store.add("aws/vpc", Template(name="vpc"), hive="aws")
        store.add("aws/subnet", Template.from_dict(self.TEMPLATES["subnet"]), hive="aws")
        registry = ProviderRegistry()
        page = _page([{
            "id": "v", "name": "v", "template": "aws/vpc",
            "children": [{"id": "s", "template": "subnet"}],
        }])
        TemplateProcessor(store, registry).process_page(page)
        assert page.elements[0].children[0].type == "shape"


class TestIdentity:
    def test_page_element_needs_id_and_name(self):
        page = _page([{"id": "only-id", "type": "shape"}])
        with pytest.raises(StructuralInvariantError):
            _processor().process_page(page)

    def test_child_needs_id_or_name(self):
        page = _page([{"id": "p", "name": "p", "type": "container", "children": [{"type": "shape"}]}])
        with pytest.raises(StructuralInvariantError) as exc:
            _processor().process_page(page)
        assert str(exc.value).startswith("element p: element 0: ")

    def test_layer_elements_need_only_one(self):
        page = Page.from_dict({"id": "p1", "name": "P", "layers": [
            {"id": "l1", "name": "L", "elements": [{"id": "a", "type": "shape"}]},
        ]})
        _processor().process_page(page)


class TestResources:
    def test_core_shape(self):
        page = _page([{"id": "s1", "name": "Box", "resource": "core-shape",
                       "parameters": {"label": "Hello", "width": 200}}])
        _processor().process_page(page)
        element = page.elements[0]
        assert (element.id, element.name) == ("s1", "Box")
        assert element.type == "shape"
        assert element.properties.label == "Hello"
        assert element.properties.width == 200
        assert element.properties.height == 80
        assert element.style.fill_color == "#E3F2FD"

    def test_unknown_provider(self):
        page = _page([{"id": "x", "name": "x", "resource": "foo-bar"}])
        with pytest.raises(ProviderNotFoundError) as exc:
            _processor().process_page(page)
        assert exc.value.provider == "foo"

    def test_invalid_parameters(self):
        page = _page([{"id": "x", "name": "x", "resource": "core-shape", "parameters": {"width": 50}}])
        with pytest.raises(ValidationError) as exc:
            _processor().process_page(page)
        assert exc.value.field == "label"

    def test_unsupported_resource(self):
        page = _page([{"id": "x", "name": "x", "resource": "core-widget", "parameters": {}}])
        with pytest.raises(ProviderError) as exc:
            _processor().process_page(page)
        assert exc.value.code == "UNSUPPORTED_RESOURCE"

    def test_builtin_ref_rejects_registry_entry(self):
        class Custom(CoreProvider):
            @property
            def name(self) -> str:
                return "custom"

        processor = _processor()
        processor.registry.register(Custom())
        processor.load_provider_refs([ProviderRef(name="custom", type="builtin")])
        page = _page([{"id": "x", "name": "x", "resource": "custom-shape", "parameters": {"label": "a"}}])
        with pytest.raises(ProviderNotFoundError):
            processor.process_page(page)

    def test_source_maps_to_registry_name(self):
        processor = _processor()
        doc = DiagramDocument.from_dict({
            "version": "1.0",
            "providers": [{"name": "basic", "source": "acme/yaml2drawio-provider-core"}],
            "diagram": {"pages": [{"id": "p1", "name": "P", "elements": [
                {"id": "t", "name": "t", "resource": "basic-text", "parameters": {"label": "hi"}},
            ]}]},
        })
        processor.process_document(doc)
        assert doc.diagram.pages[0].elements[0].type == "text"


def test_errors_carry_page_context():
    doc = DiagramDocument.from_dict({
        "version": "1.0",
        "diagram": {"pages": [{"id": "p1", "name": "P", "elements": [
            {"id": "x", "name": "Thing", "template": "ghost"},
        ]}]},
    })
    with pytest.raises(TemplateNotFoundError) as exc:
        _processor().process_document(doc)
    assert str(exc.value).startswith("page p1: element Thing: template ghost not found")


def test_element_copy_is_deep():
    element = Element.from_dict({"id": "a", "children": [{"id": "b"}]})
    clone = element.copy()
    clone.children[0].id = "c"
    assert element.children[0].id == "b"
