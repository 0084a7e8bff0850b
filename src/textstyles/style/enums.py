"""Keyword enums for style properties; each member's value is its CSS keyword."""

from __future__ import annotations

from enum import Enum


class CssKeyword(Enum):
    """Base for enums whose members are spelled as CSS keywords."""

    @classmethod
    def from_css(cls, keyword: str) -> CssKeyword:
        """Resolve a keyword case-insensitively; raises ValueError when unknown."""
        wanted = keyword.strip().lower()
        for member in cls:
            if member.value == wanted:
                return member
        allowed = ", ".join(m.value for m in cls)
        raise ValueError(f"{keyword!r} is not one of: {allowed}")

    @property
    def css(self) -> str:
        return self.value


class FontStyle(CssKeyword):
    NORMAL = "normal"
    ITALIC = "italic"


class FontWeight(CssKeyword):
    NORMAL = "normal"
    BOLD = "bold"


class TextAlign(CssKeyword):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFIED = "justified"


class TextDecoration(CssKeyword):
    NONE = "none"
    UNDERLINE = "underline"
    LINE_THROUGH = "line-through"


class TextTransform(CssKeyword):
    NONE = "none"
    CAPITALIZE = "capitalize"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"


class TextOverflow(CssKeyword):
    NONE = "none"
    CLIP = "clip"
    ELLIPSIS = "ellipsis"
