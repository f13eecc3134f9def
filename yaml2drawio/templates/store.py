#!/usr/bin/env python3
"""
Template store and hive-aware resolver.

Templates are keyed by name, optionally namespaced by a hive
(``hive/name``). A hive is a template collection: the first directory
below the templates root, or a directory declared by a hive reference.
Only collections recorded as hives take part in the hive scan of
``resolve``; a template merely *named* ``a/b`` is reachable by its full
key or from inside hive ``a``.
"""

from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

import yaml

from yaml2drawio.diagram_types import TemplateKey
from yaml2drawio.errors import DiagramError, TemplateLoadError
from yaml2drawio.schema.model import TemplateHiveRef, TemplateRef
from yaml2drawio.schema.template import Template

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIXES = (".yaml", ".yml")
HIVE_SEPARATOR = "/"


def template_key(name: str, hive: str = "") -> TemplateKey:
    if not hive:
        return TemplateKey(name)
    return TemplateKey(hive + HIVE_SEPARATOR + name)


def read_template(path: Path) -> Template:
    """Parse one template file. Any failure becomes TemplateLoadError."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise TemplateLoadError(str(path), str(e)) from e
    if not isinstance(data, dict):
        raise TemplateLoadError(str(path), "template file must contain a mapping")
    try:
        template = Template.from_dict(data)
    except DiagramError as e:
        raise TemplateLoadError(str(path), str(e)) from e
    if not template.name:
        template.name = path.stem
    return template


def _walk_files(root: Path) -> Iterable[Path]:
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for filename in sorted(filenames):
            yield Path(dirpath) / filename


def _matches(pattern: str, path: Path, base: Path) -> bool:
    """Match against the basename, then the base-relative posix path."""
    if fnmatch.fnmatchcase(path.name, pattern):
        return True
    return fnmatch.fnmatchcase(path.relative_to(base).as_posix(), pattern)


class TemplateStore:
    def __init__(self, templates_dir: str = "") -> None:
        self.templates_dir = templates_dir
        self._templates: Dict[str, Template] = {}
        self._hives: Dict[str, List[str]] = {}

    # ===============================================
    # LOADING
    # ===============================================

    def add(self, key: str, template: Template, hive: str = "", member: str = "") -> None:
        """Store ``template`` under ``key``; ``hive`` records hive membership."""
        self._templates[key] = template
        if hive:
            self._hives.setdefault(hive, []).append(member or template.name)
        logger.debug("Loaded template %s (hive=%s)", key, hive or "-")

    def load(self, path: Optional[str] = None) -> None:
        """Load every .yaml/.yml file below ``path`` (default: the templates dir)."""
        root_dir = path if path is not None else self.templates_dir
        if not root_dir:
            return
        root = Path(root_dir)
        if not root.is_dir():
            raise TemplateLoadError(str(root), "templates directory does not exist")

        for file_path in _walk_files(root):
            if file_path.suffix not in TEMPLATE_SUFFIXES:
                continue
            template = read_template(file_path)
            parts = file_path.relative_to(root).parts
            hive = parts[0] if len(parts) > 1 else ""
            self.add(template_key(template.name, hive), template, hive=hive)

    def _local_path(self, path: str) -> Path:
        candidate = Path(path)
        if candidate.is_absolute() or not self.templates_dir:
            return candidate
        return Path(self.templates_dir) / candidate

    def load_hive(self, ref: TemplateHiveRef) -> None:
        """Load a declared hive; keys are ``<hive>/<relative path without suffix>``."""
        if ref.source:
            raise TemplateLoadError(ref.source, f"external template hive sources are not supported (hive {ref.name})")
        base = self._local_path(ref.path) if ref.path else Path(self.templates_dir or ".")
        if not base.is_dir():
            raise TemplateLoadError(str(base), f"template hive {ref.name} directory does not exist")

        for file_path in _walk_files(base):
            if ref.include:
                if not _matches(ref.include, file_path, base):
                    continue
            elif file_path.suffix not in TEMPLATE_SUFFIXES:
                continue
            if ref.exclude and _matches(ref.exclude, file_path, base):
                continue

            template = read_template(file_path)
            relative = file_path.relative_to(base).with_suffix("").as_posix()
            self.add(template_key(relative, ref.name), template, hive=ref.name, member=relative)

    def load_hive_refs(self, refs: Sequence[TemplateHiveRef]) -> None:
        for ref in refs:
            try:
                self.load_hive(ref)
            except DiagramError as err:
                raise err.add_context(f"template hive {ref.name}")

    def load_ref(self, ref: TemplateRef) -> None:
        """Load one template file; the ref's name replaces the file's own name."""
        if ref.source:
            raise TemplateLoadError(ref.source, f"external template sources are not supported (template {ref.name})")
        if not ref.path:
            raise TemplateLoadError(ref.name, "template reference must specify either source or path")
        template = read_template(self._local_path(ref.path))
        if ref.name:
            template.name = ref.name
        self.add(template_key(template.name), template)

    def load_refs(self, refs: Sequence[TemplateRef]) -> None:
        for ref in refs:
            self.load_ref(ref)

    # ===============================================
    # LOOKUP
    # ===============================================

    def get(self, key: str) -> Optional[Template]:
        return self._templates.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def list_templates(self) -> List[str]:
        return sorted(self._templates)

    def list_hives(self) -> List[str]:
        return sorted(self._hives)

    def list_templates_in_hive(self, hive: str) -> List[str]:
        return list(self._hives.get(hive, []))

    @staticmethod
    def current_hive(ancestors: Sequence[str]) -> str:
        """Hive of the nearest ancestor template, '' outside any hive."""
        if not ancestors or HIVE_SEPARATOR not in ancestors[0]:
            return ""
        return ancestors[0].split(HIVE_SEPARATOR, 1)[0]

    def resolve(self, reference: str, current_hive: str = "") -> str:
        """Qualify a template reference.

        Order: already qualified, current hive, root scope, any known hive
        (sorted). An unresolvable reference is returned unchanged; the
        caller reports it.
        """
        if HIVE_SEPARATOR in reference:
            return reference

        if current_hive:
            key = template_key(reference, current_hive)
            if key in self._templates:
                return key

        if reference in self._templates:
            return reference

        for hive in sorted(self._hives):
            key = template_key(reference, hive)
            if key in self._templates:
                logger.debug("Resolved %s by hive scan to %s", reference, key)
                return key

        return reference


__all__ = ["TemplateStore", "template_key", "read_template", "TEMPLATE_SUFFIXES"]
