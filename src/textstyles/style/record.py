"""StyleRecord: the typed, mergeable bag of styling properties for one selector."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace

from textstyles.style.enums import (
    FontStyle,
    FontWeight,
    TextAlign,
    TextDecoration,
    TextOverflow,
    TextTransform,
)


@dataclass
class StyleRecord:
    """Resolved styling properties for a selector.

    Every property is optional. A property is "unset" while it holds its
    declared default: ``None`` for strings and numbers, the neutral member for
    keyword enums. A record with nothing set adds no styling of its own.
    """

    name: str

    # typography
    font: str | None = None
    font_size: float | None = None
    font_style: FontStyle = FontStyle.NORMAL
    font_weight: FontWeight = FontWeight.NORMAL

    # colors (hex or named, passed through untouched)
    color: str | None = None
    background_color: str | None = None
    text_decoration_color: str | None = None

    # spacing
    letter_spacing: float | None = None
    line_height: float | None = None
    text_indent: float | None = None

    # block box
    padding: tuple[float, ...] | None = None
    padding_left: float | None = None
    padding_top: float | None = None
    padding_right: float | None = None
    padding_bottom: float | None = None

    # text shaping
    text_align: TextAlign = TextAlign.LEFT
    text_decoration: TextDecoration = TextDecoration.NONE
    text_transform: TextTransform = TextTransform.NONE
    text_overflow: TextOverflow = TextOverflow.NONE

    # custom
    lines: int | None = None
    raw_css: str = field(default="", compare=False, repr=False)

    def __setattr__(self, key: str, value: object) -> None:
        if key == "name" and "name" in self.__dict__:
            raise AttributeError("StyleRecord.name cannot be reassigned")
        super().__setattr__(key, value)

    # --- inspection -----------------------------------------------------------

    def is_set(self, attr: str) -> bool:
        """Return True if *attr* holds something other than its unset default."""
        return getattr(self, attr) != _DEFAULTS[attr]

    def set_fields(self) -> list[str]:
        return [attr for attr in _DEFAULTS if self.is_set(attr)]

    def is_empty(self) -> bool:
        return not self.set_fields()

    def line_height_offset(self) -> float:
        """Font size minus line height; 0 when either is unset."""
        if self.font_size is None or self.line_height is None:
            return 0.0
        return self.font_size - self.line_height

    def requires_markup(self) -> bool:
        """True when the style can only be rendered as a span, not as view-level settings."""
        if self.text_decoration is not TextDecoration.NONE:
            return True
        if self.letter_spacing:
            return True
        if self.font_style is FontStyle.ITALIC:
            return True
        return self.font_weight is FontWeight.BOLD

    # --- combination ----------------------------------------------------------

    def merge(self, source: StyleRecord, overwrite_existing: bool = False) -> None:
        """Copy set properties from *source* into this record.

        Unset source properties never have an effect. A property already set
        here is kept unless *overwrite_existing* is true, except for
        ``text_align``, ``text_decoration``, ``text_overflow`` and
        ``text_transform``: for those only the source is inspected, so any
        non-neutral source value replaces the current one.
        """
        for attr, default in _DEFAULTS.items():
            value = getattr(source, attr)
            if value == default:
                continue
            target_set = attr not in _NEUTRAL_DEFAULT_FIELDS and self.is_set(attr)
            if target_set and not overwrite_existing:
                continue
            setattr(self, attr, value)

    def clone(self, name: str | None = None) -> StyleRecord:
        """Return an independent copy, optionally under a different name."""
        return replace(self, name=self.name if name is None else name)

    def assign_from(self, other: StyleRecord) -> None:
        """Overwrite every property (not the name) with the values of *other*."""
        for attr in _DEFAULTS:
            setattr(self, attr, getattr(other, attr))
        self.raw_css = other.raw_css


# Fields whose neutral default doubles as a legitimate value.
_NEUTRAL_DEFAULT_FIELDS = frozenset(
    {"text_align", "text_decoration", "text_overflow", "text_transform"}
)

_DEFAULTS: dict[str, object] = {
    f.name: f.default for f in fields(StyleRecord) if f.name not in ("name", "raw_css")
}
