"""Tests for the tag-to-run converter."""

import pytest

from textstyles.errors import UnresolvedSelectorError
from textstyles.markup import Conversion, Run, TagOverride, convert, style_text
from textstyles.style import FontStyle, FontWeight, StyleRecord, TextTransform, parse_styles

CSS = """
body { font-family: Avenir-Book; font-size: 16px; color: #333333; }
h1 { font-size: 24px; font-weight: bold; }
i { font-style: italic; }
p { color: #0000ff; }
shout { text-transform: uppercase; }
quiet { text-transform: lowercase; }
"""


@pytest.fixture()
def table():
    return parse_styles(CSS)


def _spans(result: Conversion) -> list[tuple[str, str]]:
    return [(run.style.name, run.text(result.text)) for run in result.runs]


# ---------------------------------------------------------------------------
# Basic conversion
# ---------------------------------------------------------------------------


class TestConvert:
    def test_single_tag(self, table):
        result = convert("Plain text with <i>emphasis</i> inside.", table, "body")
        assert result.text == "Plain text with emphasis inside."
        (run,) = result.runs_for("i")
        assert run.text(result.text) == "emphasis"
        assert (run.start, run.length) == (16, 8)

    def test_tag_style_is_merged_over_default(self, table):
        result = convert("Plain text with <i>emphasis</i> inside.", table, "body")
        style = result.runs_for("i")[0].style
        assert style.font_style is FontStyle.ITALIC
        assert style.font == "Avenir-Book"
        assert style.font_size == 16.0
        assert style.color == "#333333"

    def test_body_run_is_last_and_covers_everything(self, table):
        result = convert("Plain text with <i>emphasis</i> inside.", table, "body")
        body = result.runs[-1]
        assert body.style.name == "body"
        assert (body.start, body.end) == (0, len(result.text))

    def test_nested_tags(self, table):
        result = convert(
            "A <p>B <spot>C</spot> D</p> E",
            table,
            "body",
            overrides=[TagOverride("spot", css="spot{color:#ff0000}")],
        )
        assert result.text == "A B C D E"
        assert _spans(result) == [("spot", "C"), ("p", "B C D"), ("body", "A B C D E")]
        spot, p, body = result.runs
        assert p.start <= spot.start and spot.end <= p.end
        assert body.start <= p.start and p.end <= body.end

    def test_adjacent_tags(self, table):
        result = convert("<i>a</i><p>b</p>", table, "body")
        assert _spans(result) == [("i", "a"), ("p", "b"), ("body", "ab")]

    def test_default_selector_other_than_body(self, table):
        result = convert("Title <i>x</i>", table, "h1")
        assert result.runs_for("i")[0].style.font_weight is FontWeight.BOLD
        body = result.runs[-1]
        assert body.style.name == "body"
        assert body.style.font_size == 24.0

    def test_table_is_not_modified(self, table):
        before = {name: rec.clone() for name, rec in table.items()}
        convert(
            "<spot>x</spot> <i>y</i>",
            table,
            "body",
            overrides=[TagOverride("spot", css="spot{color:#ff0000}")],
        )
        assert "spot" not in table
        assert table == before


# ---------------------------------------------------------------------------
# Overrides
# ---------------------------------------------------------------------------


class TestOverrides:
    def test_inline_css_extends_default_style(self, table):
        result = convert(
            "little <spot>extra</spot>",
            table,
            "body",
            overrides=[TagOverride("spot", css="spot{color:#ff0000}")],
        )
        style = result.runs_for("spot")[0].style
        assert style.color == "#ff0000"
        assert style.font_size == 16.0
        assert style.font == "Avenir-Book"

    def test_inline_css_extends_existing_entry(self, table):
        result = convert(
            "<i>x</i>",
            table,
            "body",
            overrides=[TagOverride("i", css="i{color:#00ff00}")],
        )
        style = result.runs_for("i")[0].style
        assert style.color == "#00ff00"
        assert style.font_style is FontStyle.ITALIC
        assert style.font == "Avenir-Book"

    def test_without_merging(self, table):
        result = convert(
            "<spot>x</spot>",
            table,
            "body",
            overrides=[TagOverride("spot", css="spot{color:#ff0000}")],
            merge_existing_styles=False,
        )
        style = result.runs_for("spot")[0].style
        assert style.color == "#ff0000"
        assert style.font_size is None

    def test_named_override(self, table):
        result = convert("x <em>y</em>", table, "body", overrides=[TagOverride("em", name="h1")])
        (run,) = result.runs_for("em")
        assert run.text(result.text) == "y"
        assert run.style.font_size == 24.0
        assert run.style.color == "#333333"

    def test_named_override_must_exist(self, table):
        with pytest.raises(UnresolvedSelectorError):
            convert("<em>y</em>", table, "body", overrides=[TagOverride("em", name="nope")])

    def test_caller_body_override_wins(self, table):
        result = convert(
            "<i>x</i>",
            table,
            "body",
            overrides=[TagOverride("body", css="body{color:#000000}")],
        )
        body = result.runs[-1]
        assert body.style.color == "#000000"
        assert body.style.font_size == 16.0

    def test_caller_overrides_are_not_mutated(self, table):
        overrides = [TagOverride("spot", css="spot{color:#ff0000}")]
        convert("<spot>x</spot>", table, "body", overrides=overrides)
        assert overrides == [TagOverride("spot", css="spot{color:#ff0000}")]


# ---------------------------------------------------------------------------
# Edge cases
# ---------------------------------------------------------------------------


class TestEdgeCases:
    def test_unknown_default_selector(self, table):
        with pytest.raises(UnresolvedSelectorError) as excinfo:
            convert("<i>x</i>", table, "missing")
        assert excinfo.value.selector == "missing"

    def test_plain_text_fast_path(self, table):
        result = convert("Hello", table, "body")
        assert result.text == "Hello"
        assert [(r.start, r.length, r.style.name) for r in result.runs] == [(0, 5, "body")]

    def test_empty_text(self, table):
        assert convert("", table, "body") == Conversion("", ())

    def test_unknown_tags_are_stripped(self, table):
        result = convert("a <b>bold</b> c", table, "body")
        assert result.text == "a bold c"
        assert _spans(result) == [("body", "a bold c")]

    def test_unclosed_tag_emits_no_run(self, table):
        result = convert("a <i>b", table, "body")
        assert result.text == "a b"
        assert _spans(result) == [("body", "a b")]

    def test_stray_close_is_ignored(self, table):
        result = convert("a</i>b", table, "body")
        assert result.text == "ab"
        assert _spans(result) == [("body", "ab")]

    def test_empty_span_emits_no_run(self, table):
        result = convert("a<i></i>b", table, "body")
        assert _spans(result) == [("body", "ab")]

    def test_self_closing_tag(self, table):
        result = convert("a<i/>b", table, "body")
        assert result.text == "ab"
        assert result.runs_for("i") == []

    def test_entities_are_decoded(self, table):
        result = convert("Fish &amp; <i>chips</i>", table, "body")
        assert result.text == "Fish & chips"
        assert result.runs_for("i")[0].start == 7

    def test_explicit_body_is_not_doubled(self, table):
        result = convert("<body>Hi <i>there</i></body>", table, "body")
        assert result.text == "Hi there"
        assert _spans(result) == [("i", "there"), ("body", "Hi there")]


# ---------------------------------------------------------------------------
# Text transforms
# ---------------------------------------------------------------------------


class TestTransforms:
    def test_transform_applies_to_tag_content(self, table):
        result = convert("say <shout>hello</shout> now", table, "body")
        assert result.text == "say HELLO now"
        assert _spans(result)[0] == ("shout", "HELLO")

    def test_inner_transform_is_kept(self, table):
        result = convert("<shout>a <quiet>BIG</quiet> b</shout>", table, "body")
        assert result.text == "A big B"
        assert _spans(result)[:2] == [("quiet", "big"), ("shout", "A big B")]

    def test_length_changing_transform_shifts_inner_runs(self, table):
        result = convert("<shout>straße <i>x</i></shout>", table, "body")
        assert result.text == "STRASSE X"
        assert _spans(result) == [("i", "X"), ("shout", "STRASSE X"), ("body", "STRASSE X")]

    def test_override_transform(self, table):
        result = convert(
            "Is that little <spot>extra</spot>",
            table,
            "body",
            overrides=[TagOverride("spot", css="spot{text-transform:uppercase}")],
        )
        assert result.text == "Is that little EXTRA"

    def test_default_transform_applies_to_plain_text(self):
        table = parse_styles("h2 { text-transform: capitalize; }")
        result = convert("the difference between", table, "h2")
        assert result.text == "The Difference Between"

    def test_capitalize_with_tag_inside_word(self):
        table = parse_styles("body { text-transform: capitalize; } i { color: #f00; }")
        result = convert("hello <i>wor</i>ld again", table, "body")
        assert result.text == "Hello World Again"
        assert _spans(result)[0] == ("i", "Wor")

    def test_capitalize_around_differently_transformed_tag(self):
        table = parse_styles("body { text-transform: capitalize; } shout { text-transform: uppercase; }")
        result = convert("hello <shout>wor</shout>ld again", table, "body")
        assert result.text == "Hello WORld Again"
        assert _spans(result) == [("shout", "WOR"), ("body", "Hello WORld Again")]

    def test_inherited_transform_is_not_protected(self):
        table = parse_styles("body { text-transform: uppercase; } i { color: #f00; }")
        result = convert("a <i>straße</i> b", table, "body")
        assert result.text == "A STRASSE B"
        assert _spans(result)[0] == ("i", "STRASSE")


# ---------------------------------------------------------------------------
# style_text
# ---------------------------------------------------------------------------


class TestStyleText:
    def test_whole_text(self):
        style = StyleRecord("h1", text_transform=TextTransform.UPPERCASE)
        result = style_text(style, "ordinary")
        assert result.text == "ORDINARY"
        assert result.runs == (Run(0, 8, style),)

    def test_partial_range(self):
        style = StyleRecord("h1")
        result = style_text(style, "ordinary", 2, 5)
        assert (result.runs[0].start, result.runs[0].length) == (2, 3)

    @pytest.mark.parametrize("start, end", [(3, 3), (5, 2), (0, 99), (-1, 2)])
    def test_invalid_range(self, start, end):
        with pytest.raises(ValueError):
            style_text(StyleRecord("h1"), "ordinary", start, end)


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------


class TestRun:
    def test_runs_are_hashable(self, table):
        result = convert("a <i>b</i> c", table, "body")
        assert len(set(result.runs)) == 2
        assert isinstance(hash(result), int)

    def test_hash_ignores_style(self):
        assert hash(Run(0, 3, StyleRecord("a"))) == hash(Run(0, 3, StyleRecord("b")))
        assert Run(0, 3, StyleRecord("a")) != Run(0, 3, StyleRecord("b"))
