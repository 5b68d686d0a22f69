"""Desktop to mobile layout conversion.

Produces a mobile starting layout from a desktop snapshot by scaling
dimensions, typography and spacing, zeroing absolute offsets, and stacking
row layouts vertically. Content props are never touched.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable
from typing import Any

from layoutsync.exceptions import ParseError
from layoutsync.models.node import dump_tree, parse_tree

_LOG = logging.getLogger(__name__)

DESKTOP_MAX_WIDTH = 960
MOBILE_MAX_WIDTH = 380
MOBILE_SCALE_FACTOR = MOBILE_MAX_WIDTH / DESKTOP_MAX_WIDTH

FONT_SIZE_SCALE_FACTOR = 0.85
MIN_FONT_SIZE = 12
MAX_FONT_SIZE = 48
DEFAULT_FONT_SIZE = "16px"

SPACING_SCALE_FACTOR = 0.7
MIN_SPACING = 4

MAX_MOBILE_GRID_COLUMNS = 2

_KEYWORD_DIMENSIONS = frozenset({"auto", "inherit", "initial"})
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

Props = dict[str, Any]


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _round(value: float) -> int:
    """Round half up, the way the editor rounds pixel values."""
    return math.floor(value + 0.5)


def _leading_int(value: str) -> int | None:
    match = _LEADING_INT_RE.match(value)
    return int(match.group(1)) if match else None


def scale_dimension_for_mobile(value: Any) -> Any:
    """Scale a pixel dimension to the mobile viewport.

    Percentages and CSS keywords are returned unchanged, as is anything that
    has no leading integer.
    """
    if isinstance(value, str):
        if "%" in value or value in _KEYWORD_DIMENSIONS:
            return value
        number = _leading_int(value)
        if number is None:
            return value
        return f"{_round(number * MOBILE_SCALE_FACTOR)}px"
    if _is_number(value):
        return f"{_round(value * MOBILE_SCALE_FACTOR)}px"
    return value


def scale_font_size_for_mobile(font_size: Any) -> str:
    if _is_number(font_size):
        number: float | None = font_size
    elif isinstance(font_size, str):
        number = _leading_int(font_size)
    else:
        number = None
    if number is None:
        return DEFAULT_FONT_SIZE
    scaled = _round(number * FONT_SIZE_SCALE_FACTOR)
    return f"{max(MIN_FONT_SIZE, min(MAX_FONT_SIZE, scaled))}px"


def scale_spacing_for_mobile(spacing: Any) -> Any:
    """Shrink padding/margin values; numbers become a one-element list."""
    if _is_number(spacing):
        return [max(MIN_SPACING, _round(spacing * SPACING_SCALE_FACTOR))]
    if isinstance(spacing, list):
        return [max(MIN_SPACING, _round(v * SPACING_SCALE_FACTOR)) if _is_number(v) else v for v in spacing]
    return spacing


def _scale_radii(radii: Any) -> Any:
    if not isinstance(radii, list):
        return radii
    return [_round(r * MOBILE_SCALE_FACTOR) if _is_number(r) else r for r in radii]


def _scale_fields(value: Any, fields: tuple[str, ...]) -> Any:
    if not isinstance(value, dict):
        return value
    scaled = dict(value)
    for field in fields:
        if _is_number(scaled.get(field)):
            scaled[field] = _round(scaled[field] * MOBILE_SCALE_FACTOR)
    return scaled


def _scale_width_height(props: Props, *, keep_full_width: bool = True) -> None:
    width = props.get("width")
    if width and width != "auto" and not (keep_full_width and width == "100%"):
        props["width"] = scale_dimension_for_mobile(width)
    height = props.get("height")
    if height and height != "auto":
        props["height"] = scale_dimension_for_mobile(height)


def _scale_spacing_props(props: Props) -> None:
    for key in ("padding", "margin"):
        if props.get(key):
            props[key] = scale_spacing_for_mobile(props[key])


def convert_positioning_for_mobile(props: Props) -> Props:
    converted = dict(props)
    for key in ("top", "left"):
        if key in converted and converted[key] != "auto":
            converted[key] = 0
    return converted


def convert_layout_for_mobile(props: Props) -> Props:
    converted = dict(props)
    if converted.get("flexDirection") == "row":
        converted["flexDirection"] = "column"
    columns = converted.get("gridColumns")
    if _is_number(columns) and columns > MAX_MOBILE_GRID_COLUMNS:
        converted["gridColumns"] = 1 if converted.get("layoutType") == "horizontal" else MAX_MOBILE_GRID_COLUMNS
    return converted


def convert_text_props_for_mobile(props: Props) -> Props:
    converted = dict(props)
    if converted.get("fontSize"):
        converted["fontSize"] = scale_font_size_for_mobile(converted["fontSize"])
    for key in ("lineHeight", "letterSpacing"):
        value = converted.get(key)
        if isinstance(value, str) and "px" in value:
            converted[key] = scale_dimension_for_mobile(value)
    if converted.get("textShadow"):
        converted["textShadow"] = _scale_fields(converted["textShadow"], ("x", "y", "blur"))
    if converted.get("textStroke"):
        converted["textStroke"] = _scale_fields(converted["textStroke"], ("width",))
    return converted


def convert_image_props_for_mobile(props: Props) -> Props:
    converted = dict(props)
    _scale_width_height(converted)
    for key in ("cropWidth", "cropHeight"):
        if converted.get(key):
            converted[key] = scale_dimension_for_mobile(converted[key])
    for key in ("cropX", "cropY"):
        if _is_number(converted.get(key)) and converted[key]:
            converted[key] = _round(converted[key] * MOBILE_SCALE_FACTOR)
    if "borderRadius" in converted:
        converted["borderRadius"] = _scale_radii(converted["borderRadius"])
    return converted


def convert_button_props_for_mobile(props: Props) -> Props:
    converted = dict(props)
    _scale_width_height(converted, keep_full_width=False)
    _scale_spacing_props(converted)
    if "borderRadius" in converted:
        converted["borderRadius"] = _scale_radii(converted["borderRadius"])
    return converted


def convert_container_props_for_mobile(props: Props) -> Props:
    converted = dict(props)
    _scale_width_height(converted)
    if converted.get("minHeight"):
        converted["minHeight"] = scale_dimension_for_mobile(converted["minHeight"])
    _scale_spacing_props(converted)
    return convert_layout_for_mobile(convert_positioning_for_mobile(converted))


def convert_section_props_for_mobile(props: Props) -> Props:
    converted = dict(props)
    height = converted.get("height")
    if height and height != "auto":
        converted["height"] = scale_dimension_for_mobile(height)
    if converted.get("minHeight"):
        converted["minHeight"] = scale_dimension_for_mobile(converted["minHeight"])
    if converted.get("padding"):
        converted["padding"] = scale_spacing_for_mobile(converted["padding"])
    return converted


def convert_generic_props_for_mobile(props: Props) -> Props:
    converted = convert_layout_for_mobile(convert_positioning_for_mobile(props))
    _scale_width_height(converted)
    _scale_spacing_props(converted)
    return converted


COMPONENT_CONVERTERS: dict[str, Callable[[Props], Props]] = {
    "Text": convert_text_props_for_mobile,
    "Image": convert_image_props_for_mobile,
    "Button": convert_button_props_for_mobile,
    "Container": convert_container_props_for_mobile,
    "Sections": convert_section_props_for_mobile,
    "Album": convert_layout_for_mobile,
    "Form": convert_positioning_for_mobile,
}


def convert_desktop_content_to_mobile(desktop_content: str) -> str:
    """Convert every resolved component of a desktop snapshot for mobile.

    Nodes whose ``type`` is not a ``{"resolvedName": ...}`` object are passed
    through. Unparsable content is logged and returned unchanged.
    """
    try:
        tree = parse_tree(desktop_content, label="desktop")
    except ParseError as exc:
        _LOG.warning("Error converting desktop content to mobile: %s", exc)
        return desktop_content

    for node_id, node in tree.items():
        if node is None or not isinstance(node.type, dict) or not node.resolved_name:
            continue
        converter = COMPONENT_CONVERTERS.get(node.resolved_name, convert_generic_props_for_mobile)
        tree[node_id] = node.model_copy(update={"props": converter(dict(node.props or {}))})
    return dump_tree(tree)
