from __future__ import annotations

from yaml2drawio.diagram_types import XmlValue
from yaml2drawio.utils.values import to_text


def xml_text(v: XmlValue) -> str:
    return to_text(v)


__all__ = ["xml_text"]
