#!/usr/bin/env python3
"""
Unit tests for template loading and hive-aware resolution.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from yaml2drawio.errors import TemplateLoadError
from yaml2drawio.schema.model import TemplateHiveRef, TemplateRef
from yaml2drawio.schema.template import Template
from yaml2drawio.templates.store import TemplateStore, read_template, template_key


def _write(path: Path, body: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body, encoding="utf-8")
    return path


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    _write(root / "box.yaml", "name: box\ngroup:\n  properties:\n    width: 100\n")
    _write(root / "core" / "frame.yaml", "name: frame\n")
    _write(root / "core" / "box.yml", "name: box\n")
    _write(root / "core" / "notes.txt", "not a template")
    return root


def test_template_key():
    assert template_key("box") == "box"
    assert template_key("box", "core") == "core/box"


class TestLoad:
    def test_keys_and_hives(self, templates_dir):
        store = TemplateStore(str(templates_dir))
        store.load()
        assert store.list_templates() == ["box", "core/box", "core/frame"]
        assert store.list_hives() == ["core"]
        assert sorted(store.list_templates_in_hive("core")) == ["box", "frame"]
        assert store.get("box").group.properties.width == 100

    def test_no_directory_configured(self):
        store = TemplateStore()
        store.load()
        assert len(store) == 0

    def test_missing_directory(self, tmp_path):
        with pytest.raises(TemplateLoadError):
            TemplateStore(str(tmp_path / "nope")).load()

    def test_malformed_file_aborts_load(self, templates_dir):
        _write(templates_dir / "broken.yaml", "name: [unterminated\n")
        with pytest.raises(TemplateLoadError) as exc:
            TemplateStore(str(templates_dir)).load()
        assert "broken.yaml" in str(exc.value)

    def test_non_mapping_file(self, tmp_path):
        path = _write(tmp_path / "list.yaml", "- a\n- b\n")
        with pytest.raises(TemplateLoadError):
            read_template(path)

    def test_name_falls_back_to_file_stem(self, tmp_path):
        path = _write(tmp_path / "server.yaml", "description: no name\n")
        assert read_template(path).name == "server"


class TestResolve:
    def test_order(self, templates_dir):
        store = TemplateStore(str(templates_dir))
        store.load()
        # current hive first
        assert store.resolve("box", "core") == "core/box"
        # then root scope
        assert store.resolve("box") == "box"
        # then the hive scan
        assert store.resolve("frame") == "core/frame"

    def test_qualified_reference_is_unchanged(self, templates_dir):
        store = TemplateStore(str(templates_dir))
        store.load()
        assert store.resolve("other/thing", "core") == "other/thing"

    def test_unknown_reference_is_unchanged(self, templates_dir):
        store = TemplateStore(str(templates_dir))
        store.load()
        assert store.resolve("ghost", "core") == "ghost"

    def test_hive_scan_is_sorted(self):
        store = TemplateStore()
        store.add("zeta/db", Template(name="db"), hive="zeta")
        store.add("alpha/db", Template(name="db"), hive="alpha")
        assert store.resolve("db") == "alpha/db"

    def test_named_keys_without_hive_record(self):
        # templates whose names contain '/' but were not loaded as a hive
        store = TemplateStore()
        store.add("core/frame", Template(name="core/frame"))
        store.add("core/box", Template(name="core/box"))
        assert store.resolve("box", "core") == "core/box"
        assert store.resolve("box") == "box"
        assert store.get(store.resolve("box")) is None

    def test_current_hive(self):
        assert TemplateStore.current_hive(()) == ""
        assert TemplateStore.current_hive(("plain",)) == ""
        assert TemplateStore.current_hive(("core/frame", "aws/vpc")) == "core"


class TestRefs:
    def test_load_ref_overrides_name(self, templates_dir):
        store = TemplateStore(str(templates_dir))
        store.load_refs([TemplateRef(name="big-box", path="box.yaml")])
        assert "big-box" in store
        assert store.get("big-box").name == "big-box"

    def test_load_ref_absolute_path(self, templates_dir):
        store = TemplateStore()
        store.load_ref(TemplateRef(name="frame", path=str(templates_dir / "core" / "frame.yaml")))
        assert store.list_templates() == ["frame"]

    def test_external_source_is_rejected(self):
        with pytest.raises(TemplateLoadError):
            TemplateStore().load_ref(TemplateRef(name="x", source="https://example.com/x.yaml"))

    def test_ref_without_path(self):
        with pytest.raises(TemplateLoadError):
            TemplateStore().load_ref(TemplateRef(name="x"))

    def test_load_hive_with_filters(self, tmp_path):
        base = tmp_path / "aws"
        _write(base / "vpc.yaml", "name: vpc\n")
        _write(base / "network" / "subnet.yaml", "name: subnet\n")
        _write(base / "skip-me.yaml", "name: skipped\n")
        store = TemplateStore()
        store.load_hive_refs([TemplateHiveRef(name="aws", path=str(base), include="*.yaml", exclude="skip-*")])
        assert store.list_templates() == ["aws/network/subnet", "aws/vpc"]
        assert store.list_hives() == ["aws"]
        assert store.resolve("vpc") == "aws/vpc"

    def test_hive_path_relative_to_templates_dir(self, templates_dir):
        store = TemplateStore(str(templates_dir))
        store.load_hive(TemplateHiveRef(name="c", path="core"))
        assert store.list_templates() == ["c/box", "c/frame"]

    def test_missing_hive_directory(self, tmp_path):
        with pytest.raises(TemplateLoadError) as exc:
            TemplateStore().load_hive_refs([TemplateHiveRef(name="gone", path=str(tmp_path / "gone"))])
        assert str(exc.value).startswith("template hive gone:")

    def test_external_hive_source_is_rejected(self):
        with pytest.raises(TemplateLoadError):
            TemplateStore().load_hive(TemplateHiveRef(name="remote", source="github.com/acme/hive"))
