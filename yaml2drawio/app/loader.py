"""Input document loading.

YAML (``.yaml``/``.yml``) goes through PyYAML, JSON (``.json``) through
orjson. Only the document-level checks run here; element identity rules
are enforced while templates are applied.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import orjson
import yaml

from yaml2drawio.errors import ValidationError
from yaml2drawio.schema.model import DiagramDocument
from yaml2drawio.schema.validation import validate_document

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


def read_data(path: str) -> Any:
    suffix = Path(path).suffix.lower()
    if suffix in JSON_SUFFIXES:
        with open(path, "rb") as f:
            raw = f.read()
        try:
            return orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            raise ValidationError("document", f"{path}: {e}", code="INVALID_FORMAT") from e

    if suffix and suffix not in YAML_SUFFIXES:
        logger.warning("Unknown input extension %s, reading %s as YAML", suffix, path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValidationError("document", f"{path}: {e}", code="INVALID_FORMAT") from e


def load_document(path: str) -> DiagramDocument:
    data = read_data(path)
    if data is None:
        raise ValidationError("document", f"{path} is empty", code="REQUIRED")
    document = DiagramDocument.from_dict(data)
    validate_document(document)
    logger.debug("Loaded %s: %r version %s, %d page(s)",
                 path, document.metadata.title, document.version, len(document.diagram.pages))
    return document


__all__ = ["load_document", "read_data"]
