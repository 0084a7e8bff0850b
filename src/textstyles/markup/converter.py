"""Tag-to-run converter: strips inline markup and emits styled runs.

Open tags are pushed onto a stack together with the length of the de-tagged
output at that point. When the matching close tag arrives the entry is
popped, the tag's style is resolved and a Run covering the enclosed text is
emitted, so runs appear in order of tag closure and always index the
de-tagged text.

Tags are assumed to be well nested. A close tag pops whatever is on top of
the stack; mismatched nesting is not repaired.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, Mapping

from textstyles.errors import UnresolvedSelectorError
from textstyles.markup.matcher import Tag, TagKind, iter_tags, looks_like_markup, split_markup
from textstyles.markup.transform import apply_text_transform
from textstyles.style.builder import merge_single_rule
from textstyles.style.enums import TextTransform
from textstyles.style.record import StyleRecord

__all__ = [
    "BODY_TAG",
    "Conversion",
    "Run",
    "TagConverter",
    "TagOverride",
    "convert",
    "resolve_overrides",
    "style_text",
    "with_body_override",
]

logger = logging.getLogger(__name__)

BODY_TAG = "body"


@dataclass(frozen=True)
class TagOverride:
    """Call-scoped styling for a tag.

    ``name`` maps the tag onto an existing selector; ``css`` is a single rule
    of inline CSS (for example ``"spot{color:#fff}"``) layered on top.
    """

    tag: str
    name: str | None = None
    css: str | None = None


@dataclass(frozen=True)
class Run:
    """A span of de-tagged text and the style to render it with.

    Runs hash on their span only; the style record is mutable.
    """

    start: int
    length: int
    style: StyleRecord = field(hash=False)

    @property
    def end(self) -> int:
        return self.start + self.length

    def text(self, source: str) -> str:
        return source[self.start : self.end]


@dataclass(frozen=True)
class Conversion:
    """Result of a conversion: the plain text and its runs in closing order."""

    text: str
    runs: tuple[Run, ...]

    def runs_for(self, name: str) -> list[Run]:
        return [r for r in self.runs if r.style.name == name]


@dataclass(frozen=True)
class _OpenTag:
    name: str
    start: int


def with_body_override(
    overrides: Iterable[TagOverride] | None,
    default_selector: str,
    body_tag: str = BODY_TAG,
) -> list[TagOverride]:
    """Return *overrides* plus a body override mapped to *default_selector* if none exists."""
    result = list(overrides or [])
    if not any(o.tag == body_tag for o in result):
        result.append(TagOverride(body_tag, name=default_selector))
    return result


def resolve_overrides(
    table: Mapping[str, StyleRecord],
    default_style: StyleRecord,
    overrides: Iterable[TagOverride],
    *,
    merge_existing_styles: bool = True,
) -> dict[str, StyleRecord]:
    """Resolve each override into a standalone StyleRecord named after its tag.

    The shared *table* is never modified. With *merge_existing_styles* an
    inline override extends the stylesheet's own entry for its tag, or the
    default style when the tag has none; properties the override sets win.
    An override that ends up without a font family borrows the default one.
    """
    resolved: dict[str, StyleRecord] = {}
    for override in overrides:
        if override.name is not None:
            named = table.get(override.name)
            if named is None:
                raise UnresolvedSelectorError(override.name)
            style = named.clone(override.tag)
        else:
            style = StyleRecord(override.tag)

        if override.css:
            merge_single_rule(style, override.css)

        if merge_existing_styles:
            base = default_style if override.name is not None else table.get(override.tag, default_style)
            style.merge(base, overwrite_existing=False)

        if style.font is None:
            style.font = default_style.font

        resolved[override.tag] = style
    return resolved


class TagConverter:
    """Single-use state machine that converts one marked-up string."""

    def __init__(
        self,
        table: Mapping[str, StyleRecord],
        default_style: StyleRecord,
        custom: Mapping[str, StyleRecord],
        *,
        body_tag: str = BODY_TAG,
        unescape_entities: bool = True,
    ) -> None:
        self._table = table
        self._default = default_style
        self._custom = custom
        self._body_tag = body_tag
        self._unescape = unescape_entities
        self._resolved: dict[str, StyleRecord | None] = {}
        self._stack: list[_OpenTag] = []
        self._runs: list[Run] = []
        self._text = ""

    # --- style resolution -----------------------------------------------------

    def resolve(self, tag: str) -> StyleRecord | None:
        """Style for *tag*: the override, else the table entry over the default, else None."""
        if tag not in self._resolved:
            style = self._custom.get(tag)
            if style is None:
                own = self._table.get(tag)
                if own is not None:
                    style = own.clone()
                    style.merge(self._default, overwrite_existing=False)
            self._resolved[tag] = style
        return self._resolved[tag]

    # --- scanning -------------------------------------------------------------

    def convert(self, text: str) -> Conversion:
        explicit_body = any(
            t.name == self._body_tag and t.kind is TagKind.OPEN for t in iter_tags(text)
        )

        for piece in split_markup(text):
            if isinstance(piece, Tag):
                self._handle_tag(piece)
            else:
                self._text += html.unescape(piece) if self._unescape else piece

        if self._stack:
            logger.debug(
                "Ignoring %d unclosed tag(s): %s",
                len(self._stack),
                ", ".join(o.name for o in self._stack),
            )
            self._stack.clear()

        if not explicit_body:
            body = self.resolve(self._body_tag) or self._default.clone(self._body_tag)
            self._close(0, body)

        return Conversion(text=self._text, runs=tuple(self._runs))

    def _handle_tag(self, tag: Tag) -> None:
        if tag.kind is TagKind.SELF_CLOSING:
            return
        style = self.resolve(tag.name)
        if style is None:
            logger.debug("Stripping unstyled tag <%s>", tag.name)
            return
        if tag.kind is TagKind.OPEN:
            self._stack.append(_OpenTag(tag.name, len(self._text)))
            return
        if not self._stack:
            logger.debug("Ignoring </%s> with no open tag", tag.name)
            return
        opened = self._stack.pop()
        self._close(opened.start, style)

    # --- run materialization --------------------------------------------------

    def _close(self, start: int, style: StyleRecord) -> None:
        if style.text_transform is not TextTransform.NONE and start < len(self._text):
            self._transform_tail(start, style)
        length = len(self._text) - start
        if length > 0:
            self._runs.append(Run(start, length, style))

    def _transform_tail(self, start: int, style: StyleRecord) -> None:
        """Apply *style*'s transform to ``text[start:]`` keeping inner runs valid.

        Inner runs whose own transform differs from *style*'s keep their
        text. When that leaves gaps, or the transform changes lengths, the
        tail is transformed piece by piece between run boundaries and the
        inner runs are shifted to match. Word starts are judged against the
        whole tail, so a tag inside a word does not start a new one.
        """
        transform = style.text_transform
        inner = [r for r in self._runs if r.start >= start]
        protected = [
            r
            for r in inner
            if r.style.text_transform not in (TextTransform.NONE, transform)
        ]
        content = self._text[start:]

        if not protected:
            transformed = apply_text_transform(style, content)
            if len(transformed) == len(content):
                self._text = self._text[:start] + transformed
                return

        cuts = {start, len(self._text)}
        for run in inner:
            cuts.update((run.start, run.end))
        ordered = sorted(cuts)

        moved = {start: start}
        pieces: list[str] = []
        pos = start
        for left, right in zip(ordered, ordered[1:]):
            piece = self._text[left:right]
            if not any(r.start <= left and right <= r.end for r in protected):
                at_word_start = left == start or self._text[left - 1].isspace()
                piece = apply_text_transform(style, piece, at_word_start)
            pieces.append(piece)
            pos += len(piece)
            moved[right] = pos

        self._runs = [
            replace(r, start=moved[r.start], length=moved[r.end] - moved[r.start])
            if r.start >= start
            else r
            for r in self._runs
        ]
        self._text = self._text[:start] + "".join(pieces)


def convert(
    text: str,
    table: Mapping[str, StyleRecord],
    default_selector: str,
    overrides: Iterable[TagOverride] | None = None,
    *,
    merge_existing_styles: bool = True,
    body_tag: str = BODY_TAG,
    unescape_entities: bool = True,
) -> Conversion:
    """Convert marked-up *text* into plain text plus styled runs.

    *default_selector* must exist in *table*; it styles the implicit body
    that spans the whole output. Text without markup skips tag processing
    and comes back as a single body run.
    """
    default_style = table.get(default_selector)
    if default_style is None:
        raise UnresolvedSelectorError(default_selector)

    custom = resolve_overrides(
        table,
        default_style,
        with_body_override(overrides, default_selector, body_tag),
        merge_existing_styles=merge_existing_styles,
    )

    if not looks_like_markup(text):
        return style_text(custom[body_tag], text) if text else Conversion("", ())

    converter = TagConverter(
        table,
        default_style,
        custom,
        body_tag=body_tag,
        unescape_entities=unescape_entities,
    )
    return converter.convert(text)


def style_text(
    style: StyleRecord, text: str, start: int = 0, end: int | None = None
) -> Conversion:
    """Style plain *text* with a single run over ``[start, end)``.

    *end* defaults to the length of the transformed text.
    """
    text = apply_text_transform(style, text)
    if end is None:
        end = len(text)
    if start < 0 or start >= end or end > len(text):
        raise ValueError(f"Invalid run bounds [{start}, {end}) for text of length {len(text)}")
    return Conversion(text=text, runs=(Run(start, end - start, style),))
