"""Text content transforms driven by a style's ``text_transform`` property."""

from __future__ import annotations

import re

from textstyles.style.enums import TextTransform
from textstyles.style.record import StyleRecord

_WORD_RE = re.compile(r"\S+")


def capitalize_words(text: str, at_word_start: bool = True) -> str:
    """Upper-case the first character of every word and lower-case the rest.

    With *at_word_start* false, *text* continues a word begun before it, so
    its leading fragment is only lower-cased.
    """

    def title(match: re.Match[str]) -> str:
        word = match.group(0)
        if match.start() == 0 and not at_word_start:
            return word.lower()
        return word[:1].upper() + word[1:].lower()

    return _WORD_RE.sub(title, text)


def apply_text_transform(style: StyleRecord, text: str, at_word_start: bool = True) -> str:
    if not text:
        return text
    transform = style.text_transform
    if transform is TextTransform.UPPERCASE:
        return text.upper()
    if transform is TextTransform.LOWERCASE:
        return text.lower()
    if transform is TextTransform.CAPITALIZE:
        return capitalize_words(text, at_word_start)
    return text
