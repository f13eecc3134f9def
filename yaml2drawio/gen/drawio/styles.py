"""Style string synthesis.

A draw.io style is a ``;``-joined list of ``key=value`` tokens (or bare
markers such as ``text``). Tokens are emitted in a fixed order so the same
element always yields the same string.
"""
from __future__ import annotations

from typing import List, Optional

from yaml2drawio.diagram_types import ElementType
from yaml2drawio.meta import DEFAULT_META, DrawioMetaModel
from yaml2drawio.schema.model import Element, Layer
from yaml2drawio.utils.values import format_number


def contains_style(tokens: List[str], key: str) -> bool:
    """True if ``key`` is present as ``key=...`` or as a bare marker."""
    prefix = key + "="
    return any(token == key or token.startswith(prefix) for token in tokens)


def _fixed(value: float) -> str:
    return f"{value:.1f}"


def style_tokens(element: Element, meta: Optional[DrawioMetaModel] = None) -> List[str]:
    meta = meta or DEFAULT_META
    props, style = element.properties, element.style
    tokens: List[str] = []

    if props.shape:
        tokens.append(f"shape={props.shape}")

    if style.fill_color:
        tokens.append(f"fillColor={style.fill_color}")
    if style.fill_opacity > 0:
        tokens.append(f"fillOpacity={format_number(style.fill_opacity)}")
    if style.stroke_color:
        tokens.append(f"strokeColor={style.stroke_color}")
    if style.stroke_width > 0:
        tokens.append(f"strokeWidth={_fixed(style.stroke_width)}")
    if style.stroke_opacity > 0:
        tokens.append(f"strokeOpacity={format_number(style.stroke_opacity)}")
    if style.stroke_dash_array:
        tokens.append(f"strokeDashArray={style.stroke_dash_array}")
        tokens.append("dashed=1")

    if style.font_family:
        tokens.append(f"fontFamily={style.font_family}")
    if style.font_size > 0:
        tokens.append(f"fontSize={style.font_size}")
    if style.font_color:
        tokens.append(f"fontColor={style.font_color}")
    if style.font_style:
        tokens.append(f"fontStyle={meta.font_style_mask(style.font_style)}")

    if style.text_align:
        tokens.append(f"align={style.text_align}")
    if style.vertical_align:
        tokens.append(f"verticalAlign={style.vertical_align}")
    if style.label_position:
        tokens.append(f"labelPosition={style.label_position}")
    if style.vertical_label_position:
        tokens.append(f"verticalLabelPosition={style.vertical_label_position}")

    if style.rounded:
        tokens.append("rounded=1")
    if style.shadow:
        tokens.append("shadow=1")
    if style.glass:
        tokens.append("glass=1")
    if style.sketch:
        tokens.append("sketch=1")
    if style.rotation != 0:
        tokens.append(f"rotation={_fixed(style.rotation)}")

    for key, value in style.custom.items():
        tokens.append(f"{key}={value}")

    if element.type == ElementType.CONNECTOR.value:
        for key, value in meta.connector_defaults:
            if not contains_style(tokens, key):
                tokens.append(f"{key}={value}")
        _port_tokens(tokens, "exit", props.source_port, meta)
        _port_tokens(tokens, "entry", props.target_port, meta)

    elif element.type == ElementType.TEXT.value:
        if not contains_style(tokens, meta.text_marker):
            tokens.append(meta.text_marker)
        if not contains_style(tokens, "html"):
            tokens.append("html=1")

    return tokens


def _port_tokens(tokens: List[str], side: str, port: str, meta: DrawioMetaModel) -> None:
    anchor = meta.port_anchors.get(port)
    if anchor is None:
        return
    for axis, value in zip(("X", "Y"), anchor):
        key = f"{side}{axis}"
        if not contains_style(tokens, key):
            tokens.append(f"{key}={format_number(value)}")


def element_style(element: Element, meta: Optional[DrawioMetaModel] = None) -> str:
    return ";".join(style_tokens(element, meta))


def layer_style(layer: Layer) -> str:
    tokens = []
    if not layer.visible:
        tokens.append("visible=0")
    if layer.locked:
        tokens.append("locked=1")
    return ";".join(tokens)


__all__ = ["contains_style", "style_tokens", "element_style", "layer_style"]
