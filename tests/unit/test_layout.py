#!/usr/bin/env python3
"""
Unit tests for the nesting layout engine:
- default resolution (mode, arrangement, spacing, padding)
- vertical / horizontal / grid placement
- grow-only auto resize
"""

from __future__ import annotations

import pytest

from yaml2drawio.app.config import LayoutConfig
from yaml2drawio.gen.drawio.layout import NestingLayoutEngine, apply_child_defaults
from yaml2drawio.schema.model import Element, ElementProperties, NestingConfig, Padding, Style


def _children(count: int) -> list:
    return [Element(type="shape", id=f"c{i}") for i in range(count)]


def _positions(element: Element) -> list:
    return [(c.properties.x, c.properties.y) for c in element.children]


class TestResolve:
    def test_defaults_for_container(self):
        element = Element(type="container", id="box", children=_children(2))
        nesting = NestingLayoutEngine().resolve(element)
        assert nesting.mode == "container"
        assert nesting.arrangement == "horizontal"
        assert nesting.spacing == 20
        assert (nesting.padding.top, nesting.padding.right, nesting.padding.bottom, nesting.padding.left) == (30, 20, 20, 20)

    def test_many_children_use_grid(self):
        element = Element(type="shape", id="box", children=_children(5))
        nesting = NestingLayoutEngine().resolve(element)
        assert nesting.mode == "automatic"
        assert nesting.arrangement == "grid"

    def test_authored_nesting_is_not_modified(self):
        element = Element(type="group", id="g", children=_children(1))
        NestingLayoutEngine().resolve(element)
        assert element.nesting.arrangement == ""
        assert element.nesting.padding.is_zero()


@pytest.mark.parametrize("count,columns", [(1, 1), (4, 2), (5, 3), (9, 3), (16, 4), (25, 4)])
def test_grid_columns(count, columns):
    assert NestingLayoutEngine().grid_columns(count) == columns


def test_grid_columns_respects_config():
    engine = NestingLayoutEngine(LayoutConfig(max_grid_columns=2))
    assert engine.grid_columns(16) == 2


class TestArrange:
    def test_horizontal(self):
        element = Element(type="container", id="box", children=_children(3))
        NestingLayoutEngine().apply(element)
        assert _positions(element) == [(20, 30), (180, 30), (340, 30)]
        assert all(c.properties.width == 140 and c.properties.height == 60 for c in element.children)

    def test_vertical(self):
        element = Element(
            type="container", id="box", children=_children(2),
            nesting=NestingConfig(arrangement="vertical"),
        )
        NestingLayoutEngine().apply(element)
        assert _positions(element) == [(20, 30), (20, 110)]

    def test_grid_wraps_rows(self):
        element = Element(type="container", id="box", children=_children(5))
        NestingLayoutEngine().apply(element)
        assert _positions(element) == [(20, 30), (180, 30), (340, 30), (20, 110), (180, 110)]

    def test_explicit_sizes_are_kept(self):
        children = _children(2)
        children[0].properties.width = 50
        element = Element(type="container", id="box", children=children,
                          nesting=NestingConfig(spacing=10, padding=Padding(5, 5, 5, 5)))
        NestingLayoutEngine().apply(element)
        assert _positions(element) == [(5, 5), (65, 5)]
        assert children[0].properties.width == 50

    def test_free_leaves_children_alone(self):
        child = Element(type="shape", id="c", properties=ElementProperties(x=7, y=9))
        element = Element(type="container", id="box", children=[child],
                          nesting=NestingConfig(arrangement="free"))
        NestingLayoutEngine().apply(element)
        assert (child.properties.x, child.properties.y) == (7, 9)
        assert child.properties.width == 0


class TestAutoResize:
    def _parent(self, width: float) -> Element:
        child = Element(type="shape", id="c", properties=ElementProperties(x=130, y=10, width=100, height=50))
        return Element(
            type="container", id="box",
            properties=ElementProperties(width=width, height=100),
            children=[child],
            nesting=NestingConfig(auto_resize=True, arrangement="free", padding=Padding(10, 20, 20, 10)),
        )

    def test_grows_to_fit(self):
        parent = self._parent(100)
        NestingLayoutEngine().apply(parent)
        assert parent.properties.width == 250
        assert parent.properties.height == 100

    def test_never_shrinks(self):
        parent = self._parent(400)
        NestingLayoutEngine().apply(parent)
        assert parent.properties.width == 400

    def test_disabled(self):
        parent = self._parent(100)
        parent.nesting.auto_resize = False
        NestingLayoutEngine().apply(parent)
        assert parent.properties.width == 100


def test_child_defaults_fill_unset_fields():
    defaults = Element(type="text", properties=ElementProperties(width=50, height=30),
                       style=Style(fill_color="#eee"))
    child = Element(id="c", properties=ElementProperties(height=10), style=Style(fill_color="#fff"))
    apply_child_defaults(child, defaults)
    assert child.type == "text"
    assert child.properties.width == 50
    assert child.properties.height == 10
    assert child.style.fill_color == "#fff"


def test_child_defaults_applied_before_layout():
    defaults = Element(properties=ElementProperties(width=50, height=30))
    element = Element(type="container", id="box", children=_children(2),
                      nesting=NestingConfig(child_defaults=defaults))
    NestingLayoutEngine().apply(element)
    assert _positions(element) == [(20, 30), (90, 30)]
