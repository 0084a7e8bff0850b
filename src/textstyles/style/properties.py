"""Registry of CSS properties understood by StyleRecord.

Each entry ties a CSS-facing name to a record attribute plus the functions
that turn a raw declaration value into a typed value and back again.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from textstyles.style.enums import (
    CssKeyword,
    FontStyle,
    FontWeight,
    TextAlign,
    TextDecoration,
    TextOverflow,
    TextTransform,
)

__all__ = ["PropertyKind", "PropertySpec", "PROPERTIES", "PROPERTIES_BY_CSS_NAME", "clean_value"]


class PropertyKind(Enum):
    STRING = "string"
    FLOAT = "float"
    INTEGER = "integer"
    FLOAT_LIST = "float-list"
    KEYWORD = "keyword"


@dataclass(frozen=True)
class PropertySpec:
    """One CSS property.

    ``coerce`` raises ValueError for strict kinds and returns None when a
    lenient kind should leave the field untouched.
    """

    css_name: str
    attr: str
    kind: PropertyKind
    coerce: Callable[[str], object]
    format: Callable[[object], str]


_LIST_SPLIT_RE = re.compile(r"[\s,]+")


def clean_value(raw: str) -> str:
    """Drop quote characters and surrounding whitespace from a raw value."""
    return raw.replace('"', "").replace("'", "").strip()


def _strip_unit(value: str) -> str:
    value = value.strip()
    if value.lower().endswith("px"):
        value = value[:-2].strip()
    return value


def _coerce_string(value: str) -> str | None:
    return value or None


def _coerce_float(value: str) -> float:
    number = float(_strip_unit(value))
    if not math.isfinite(number):
        raise ValueError("not a finite number")
    return number


def _coerce_int(value: str) -> int | None:
    try:
        return int(value)
    except ValueError:
        return None


def _lenient_float(token: str) -> float:
    try:
        number = float(_strip_unit(token))
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def _coerce_float_list(value: str) -> tuple[float, ...] | None:
    tokens = [t for t in _LIST_SPLIT_RE.split(value) if t]
    if not tokens:
        return None
    return tuple(_lenient_float(t) for t in tokens)


def _keyword(enum_type: type[CssKeyword]) -> Callable[[str], object]:
    def coerce(value: str) -> CssKeyword:
        return enum_type.from_css(value)

    return coerce


def _number(value: object) -> str:
    text = repr(float(value))  # type: ignore[arg-type]
    return text[:-2] if text.endswith(".0") else text


def _format_string(value: object) -> str:
    text = str(value)
    return text if text.startswith("#") else f"'{text}'"


def _format_pixels(value: object) -> str:
    return _number(value) + "px"


def _format_int(value: object) -> str:
    return str(value)


def _format_float_list(value: object) -> str:
    return " ".join(_number(v) for v in value)  # type: ignore[attr-defined]


def _format_keyword(value: object) -> str:
    return value.css  # type: ignore[attr-defined]


def _string(css_name: str, attr: str) -> PropertySpec:
    return PropertySpec(css_name, attr, PropertyKind.STRING, _coerce_string, _format_string)


def _float(css_name: str, attr: str, fmt: Callable[[object], str] = _number) -> PropertySpec:
    return PropertySpec(css_name, attr, PropertyKind.FLOAT, _coerce_float, fmt)


def _enum(css_name: str, attr: str, enum_type: type[CssKeyword]) -> PropertySpec:
    return PropertySpec(css_name, attr, PropertyKind.KEYWORD, _keyword(enum_type), _format_keyword)


PROPERTIES: tuple[PropertySpec, ...] = (
    _string("font-family", "font"),
    _float("font-size", "font_size", _format_pixels),
    _enum("font-style", "font_style", FontStyle),
    _enum("font-weight", "font_weight", FontWeight),
    _string("color", "color"),
    _float("letter-spacing", "letter_spacing"),
    _float("line-height", "line_height"),
    _enum("text-align", "text_align", TextAlign),
    _enum("text-decoration", "text_decoration", TextDecoration),
    _float("text-indent", "text_indent"),
    _enum("text-overflow", "text_overflow", TextOverflow),
    _enum("text-transform", "text_transform", TextTransform),
    _string("background-color", "background_color"),
    PropertySpec("padding", "padding", PropertyKind.FLOAT_LIST, _coerce_float_list, _format_float_list),
    _float("padding-bottom", "padding_bottom"),
    _float("padding-left", "padding_left"),
    _float("padding-right", "padding_right"),
    _float("padding-top", "padding_top"),
    PropertySpec("lines", "lines", PropertyKind.INTEGER, _coerce_int, _format_int),
    _string("text-decoration-color", "text_decoration_color"),
)

PROPERTIES_BY_CSS_NAME: dict[str, PropertySpec] = {p.css_name: p for p in PROPERTIES}
