"""textstyles - CSS-styled runs for marked-up text."""

__version__ = "0.1.0"

from textstyles.config import TextStylesConfig  # noqa: E402
from textstyles.context import StyleContext  # noqa: E402
from textstyles.errors import (  # noqa: E402
    CoercionError,
    MultipleRulesError,
    ParseError,
    TextStyleError,
    UnresolvedSelectorError,
)
from textstyles.markup import (  # noqa: E402
    Conversion,
    Run,
    TagOverride,
    apply_text_transform,
    convert,
    looks_like_markup,
)
from textstyles.style import (  # noqa: E402
    StyleRecord,
    build_style_table,
    merge_single_rule,
    parse_styles,
    to_css_string,
)
from textstyles.stylesheet import parse_stylesheet  # noqa: E402

__all__ = [
    "__version__",
    "CoercionError",
    "Conversion",
    "MultipleRulesError",
    "ParseError",
    "Run",
    "StyleContext",
    "StyleRecord",
    "TagOverride",
    "TextStyleError",
    "TextStylesConfig",
    "UnresolvedSelectorError",
    "apply_text_transform",
    "build_style_table",
    "convert",
    "looks_like_markup",
    "merge_single_rule",
    "parse_styles",
    "parse_stylesheet",
    "to_css_string",
]
