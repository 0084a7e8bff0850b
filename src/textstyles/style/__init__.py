from textstyles.style.builder import (
    StyleTable,
    apply_declaration,
    build_style_table,
    merge_single_rule,
    parse_styles,
    to_css_string,
)
from textstyles.style.enums import (
    FontStyle,
    FontWeight,
    TextAlign,
    TextDecoration,
    TextOverflow,
    TextTransform,
)
from textstyles.style.record import StyleRecord

__all__ = [
    "StyleRecord",
    "StyleTable",
    "apply_declaration",
    "build_style_table",
    "merge_single_rule",
    "parse_styles",
    "to_css_string",
    "FontStyle",
    "FontWeight",
    "TextAlign",
    "TextDecoration",
    "TextOverflow",
    "TextTransform",
]
