#!/usr/bin/env python3
"""
Unit tests for the document model: camelCase parsing, style merging and the
structural checks run before and after template application.
"""

from __future__ import annotations

import datetime

import pytest

from yaml2drawio.errors import StructuralInvariantError, ValidationError
from yaml2drawio.schema import (
    DiagramDocument,
    Element,
    Page,
    Style,
    Template,
    merge_styles,
    validate_document,
    validate_element,
    validate_page,
)


def _doc(pages) -> dict:
    return {"version": "1.0", "diagram": {"pages": pages}}


class TestFromDict:
    def test_element_fields(self):
        element = Element.from_dict({
            "type": "connector",
            "id": "e1",
            "properties": {
                "source": "a", "target": "b", "sourcePort": "right",
                "waypoints": [{"x": 10, "y": 20}], "custom": {"k": 1},
            },
            "style": {"strokeWidth": 2, "fontSize": 12.0, "custom": {"dashed": 1}},
            "tags": ["net", 5],
            "nesting": {"autoResize": True, "padding": {"top": 5}, "childDefaults": {"type": "text"}},
        })
        assert element.properties.source_port == "right"
        assert element.properties.waypoints[0].y == 20
        assert element.properties.custom == {"k": 1}
        assert element.style.font_size == 12
        assert element.style.custom == {"dashed": "1"}
        assert element.tags == ["net", "5"]
        assert element.nesting.auto_resize is True
        assert element.nesting.padding.top == 5
        assert element.nesting.child_defaults.type == "text"

    def test_wrong_shape_names_the_key(self):
        with pytest.raises(ValidationError) as exc:
            Element.from_dict({"id": "a", "properties": {"width": "wide"}})
        assert exc.value.field == "width"

    def test_child_errors_carry_index(self):
        with pytest.raises(ValidationError) as exc:
            Element.from_dict({"id": "a", "children": [{"id": "b"}, "oops"]})
        assert str(exc.value).startswith("child 1: ")

    def test_document(self):
        doc = DiagramDocument.from_dict({
            "version": 1.0,
            "metadata": {"title": "T", "modified": datetime.date(2024, 5, 1), "tags": ["x"]},
            "providers": [{"name": "core", "type": "builtin"}],
            "templateHives": [{"name": "aws", "path": "aws", "include": "*.yaml"}],
            "templates": [{"name": "box", "template": "box.yaml"}],
            "diagram": {
                "properties": {"grid": {"enabled": False, "size": 5}, "scale": 1.5},
                "pages": [{"id": "p1", "name": "P", "properties": {"width": 1000},
                           "layers": [{"id": "l1", "visible": False}]}],
            },
        })
        assert doc.version == "1"
        assert doc.metadata.modified == "2024-05-01"
        assert doc.providers[0].type == "builtin"
        assert doc.template_hives[0].include == "*.yaml"
        assert doc.templates[0].path == "box.yaml"
        assert doc.diagram.properties.grid.enabled is False
        assert doc.diagram.properties.scale == 1.5
        page = doc.diagram.pages[0]
        assert page.properties.width == 1000
        assert page.layers[0].visible is False

    def test_layer_visible_by_default(self):
        page = Page.from_dict({"id": "p", "name": "p", "layers": [{"id": "l"}]})
        assert page.layers[0].visible is True

    def test_template(self):
        template = Template.from_dict({
            "name": "db",
            "dependencies": [{"type": "vpc", "relationship": "parent", "required": True}],
            "parameters": [{"name": "engine", "required": True}, {"name": "size", "default": 3}],
            "group": {"arrangement": "vertical", "icon": {"type": "image", "shape": "db.svg"},
                      "children": [{"name": "label", "type": "text"}]},
        })
        assert [p.name for p in template.required_parameters()] == ["engine"]
        assert template.parameters[1].default == 3
        assert template.group.icon.shape == "db.svg"
        assert template.group.children[0].type == "text"


class TestMergeStyles:
    def test_target_wins(self):
        target = Style(fill_color="#fff", font_size=10)
        merge_styles(target, Style(fill_color="#000", stroke_color="#111", font_size=14, stroke_width=2))
        assert target.fill_color == "#fff"
        assert target.stroke_color == "#111"
        assert target.font_size == 10
        assert target.stroke_width == 2

    def test_flags_are_ored(self):
        target = Style(shadow=True)
        merge_styles(target, Style(rounded=True))
        assert target.rounded and target.shadow

    def test_custom_setdefault(self):
        target = Style(custom={"a": "1"})
        merge_styles(target, Style(custom={"a": "2", "b": "3"}))
        assert target.custom == {"a": "1", "b": "3"}


class TestValidation:
    def test_document_requires_version(self):
        with pytest.raises(ValidationError) as exc:
            validate_document(DiagramDocument.from_dict({"diagram": {"pages": [{"id": "p"}]}}))
        assert exc.value.code == "REQUIRED"

    def test_document_requires_pages(self):
        with pytest.raises(ValidationError):
            validate_document(DiagramDocument.from_dict(_doc([])))

    def test_page_id_required(self):
        with pytest.raises(ValidationError):
            validate_document(DiagramDocument.from_dict(_doc([{"name": "nameless"}])))

    def test_duplicate_page_ids(self):
        with pytest.raises(StructuralInvariantError):
            validate_document(DiagramDocument.from_dict(_doc([{"id": "p"}, {"id": "p"}])))

    def test_page_element_identity(self):
        validate_element(Element(id="a", name="A"), page_level=True)
        with pytest.raises(StructuralInvariantError):
            validate_element(Element(id="a"), page_level=True)

    def test_nested_identity(self):
        element = Element(id="a", name="A", children=[Element(name="b", children=[Element()])])
        with pytest.raises(StructuralInvariantError) as exc:
            validate_element(element, page_level=True)
        assert str(exc.value).startswith("element A: element b: ")

    def test_page_needs_name(self):
        with pytest.raises(StructuralInvariantError):
            validate_page(Page(id="p"))
