"""Tests for text content transforms."""

import pytest

from textstyles.markup import apply_text_transform, capitalize_words
from textstyles.style import StyleRecord, TextTransform


@pytest.mark.parametrize(
    "transform, text, expected",
    [
        (TextTransform.NONE, "Mixed Case", "Mixed Case"),
        (TextTransform.UPPERCASE, "Mixed Case", "MIXED CASE"),
        (TextTransform.LOWERCASE, "Mixed Case", "mixed case"),
        (TextTransform.CAPITALIZE, "hELLO wORLD", "Hello World"),
        (TextTransform.UPPERCASE, "", ""),
    ],
)
def test_apply_text_transform(transform, text, expected):
    style = StyleRecord("p", text_transform=transform)
    assert apply_text_transform(style, text) == expected


def test_capitalize_keeps_whitespace():
    assert capitalize_words("  two\tspaced  words ") == "  Two\tSpaced  Words "


def test_capitalize_treats_punctuation_as_part_of_word():
    assert capitalize_words("don't stop") == "Don't Stop"


def test_uppercase_can_change_length():
    style = StyleRecord("p", text_transform=TextTransform.UPPERCASE)
    assert apply_text_transform(style, "straße") == "STRASSE"


def test_capitalize_continuing_a_word():
    assert capitalize_words("lD aGAIN", at_word_start=False) == "ld Again"
    assert capitalize_words(" next word", at_word_start=False) == " Next Word"


def test_apply_text_transform_continuing_a_word():
    style = StyleRecord("p", text_transform=TextTransform.CAPITALIZE)
    assert apply_text_transform(style, "ld again", at_word_start=False) == "ld Again"
