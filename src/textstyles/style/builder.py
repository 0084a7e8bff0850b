"""Style table builder: turns parsed rules into StyleRecords and back into CSS."""

from __future__ import annotations

import logging
from typing import Iterable

from textstyles.errors import CoercionError, MultipleRulesError
from textstyles.style.properties import PROPERTIES, PROPERTIES_BY_CSS_NAME, clean_value
from textstyles.style.record import StyleRecord
from textstyles.stylesheet import Rule, Stylesheet, parse_stylesheet

__all__ = [
    "StyleTable",
    "apply_declaration",
    "apply_rule",
    "build_style_table",
    "parse_styles",
    "merge_single_rule",
    "to_css_string",
]

logger = logging.getLogger(__name__)

StyleTable = dict[str, StyleRecord]


def apply_declaration(record: StyleRecord, prop: str, raw_value: str) -> bool:
    """Coerce *raw_value* for *prop* and store it on *record*.

    Returns True when the record changed. Unknown properties and lenient
    values that fail to parse are ignored; strict values raise
    :class:`CoercionError`.
    """
    spec = PROPERTIES_BY_CSS_NAME.get(prop.strip().lower())
    if spec is None:
        logger.debug("Ignoring unknown property %r on %r", prop, record.name)
        return False

    try:
        value = spec.coerce(clean_value(raw_value))
    except ValueError as e:
        raise CoercionError(spec.css_name, raw_value, str(e)) from e

    if value is None:
        logger.debug("Leaving %s unset on %r: %r", spec.css_name, record.name, raw_value)
        return False
    setattr(record, spec.attr, value)
    return True


def apply_rule(record: StyleRecord, rule: Rule) -> None:
    """Apply every declaration of *rule* to *record*, in order."""
    for decl in rule.declarations:
        apply_declaration(record, decl.prop, decl.value)
    if rule.source:
        record.raw_css = f"{record.raw_css}\n{rule.source}" if record.raw_css else rule.source


def build_style_table(rules: Stylesheet | Iterable[Rule]) -> StyleTable:
    """Build a selector -> StyleRecord mapping.

    A selector named by several rules accumulates their declarations, later
    rules winning for the properties they repeat.
    """
    if isinstance(rules, Stylesheet):
        rules = rules.rules

    table: StyleTable = {}
    for rule in rules:
        for selector in rule.selectors:
            record = table.get(selector)
            if record is None:
                record = table[selector] = StyleRecord(selector)
            apply_rule(record, rule)
    return table


def parse_styles(css: str) -> StyleTable:
    """Parse *css* and build its style table in one step."""
    return build_style_table(parse_stylesheet(css))


def merge_single_rule(target: StyleRecord, css: str, clone: bool = False) -> StyleRecord:
    """Layer one rule's worth of CSS onto *target*.

    The selector written in *css* is irrelevant; only its declarations are
    used. With *clone* the merge happens on a copy and *target* is left as it
    was. Either way nothing is modified if the CSS fails to parse or coerce.
    """
    stylesheet = parse_stylesheet(css)
    if len(stylesheet.rules) != 1:
        raise MultipleRulesError(len(stylesheet.rules))

    merged = target.clone()
    apply_rule(merged, stylesheet.rules[0])
    if clone:
        return merged
    target.assign_from(merged)
    return target


def to_css_string(tag: str, record: StyleRecord) -> str:
    """Serialize the set properties of *record* as a single ``tag{...}`` rule.

    Keyword properties holding their neutral default are indistinguishable
    from unset ones and are therefore omitted.
    """
    parts = [
        f"{spec.css_name}:{spec.format(getattr(record, spec.attr))};"
        for spec in PROPERTIES
        if record.is_set(spec.attr)
    ]
    return f"{tag}{{{''.join(parts)}}}"
