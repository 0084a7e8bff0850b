from textstyles.markup.converter import (
    BODY_TAG,
    Conversion,
    Run,
    TagConverter,
    TagOverride,
    convert,
    style_text,
)
from textstyles.markup.matcher import Tag, TagKind, iter_tags, looks_like_markup
from textstyles.markup.transform import apply_text_transform, capitalize_words

__all__ = [
    "BODY_TAG",
    "Conversion",
    "Run",
    "Tag",
    "TagConverter",
    "TagKind",
    "TagOverride",
    "apply_text_transform",
    "capitalize_words",
    "convert",
    "iter_tags",
    "looks_like_markup",
    "style_text",
]
