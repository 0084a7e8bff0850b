"""Lark-based parser for the CSS subset understood by textstyles.

Syntax example:
    /* headings */
    h1, h2 { font-family: "Avenir-Heavy"; font-size: 24px; }
    spot { color: #ff6600; text-transform: uppercase; }
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from lark import Lark, LarkError, Token, Transformer, v_args

from textstyles.errors import ParseError
from textstyles.model.diagnostic import Diagnostic, Severity
from textstyles.stylesheet.model import Declaration, Rule, Stylesheet

__all__ = ["parse_stylesheet"]

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

# A line break followed by "name:" inside one declaration means a ';' was left out.
_MISSING_SEMICOLON_RE = re.compile(r"\n(?=[ \t]*[A-Za-z-]+[ \t]*:)")

_PARSER = Lark(
    GRAMMAR_PATH.read_text(encoding="utf-8"),
    parser="lalr",
    start="start",
    propagate_positions=True,
)


def _blank_comments(source: str) -> str:
    """Replace comments with spaces, keeping newlines so positions stay valid."""
    text = _COMMENT_RE.sub(lambda m: re.sub(r"[^\n]", " ", m.group(0)), source)
    opened = text.find("/*")
    if opened != -1:
        line = text.count("\n", 0, opened) + 1
        column = opened - (text.rfind("\n", 0, opened) + 1) + 1
        raise ParseError("Unterminated comment", line=line, column=column)
    return text


class StylesheetTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into Rule objects, collecting diagnostics."""

    def __init__(self, source: str) -> None:
        super().__init__()
        self._source = source
        self.diagnostics: list[Diagnostic] = []

    def selector_list(self, items: list[Token]) -> tuple[str, ...]:
        return tuple(str(t).strip() for t in items)

    def declaration_block(self, items: list[Token]) -> list[Token]:
        return list(items)

    @v_args(meta=True)
    def rule(self, meta: object, children: list[object]) -> Rule:
        selectors: tuple[str, ...] = children[0]  # type: ignore[assignment]
        tokens: list[Token] = children[1]  # type: ignore[assignment]
        label = ", ".join(selectors)

        declarations: list[Declaration] = []
        seen: set[str] = set()
        for token in tokens:
            for decl in self._split(token, label):
                if decl.prop in seen:
                    self._report(
                        "duplicate-property",
                        f"Property {decl.prop!r} is repeated; the last value wins",
                        label,
                        decl.line,
                        Severity.INFO,
                    )
                seen.add(decl.prop)
                declarations.append(decl)

        source = ""
        if not getattr(meta, "empty", True):
            source = self._source[meta.start_pos : meta.end_pos]  # type: ignore[attr-defined]
        return Rule(selectors=selectors, declarations=tuple(declarations), source=source)

    def start(self, children: list[Rule]) -> list[Rule]:
        return list(children)

    def _split(self, token: Token, label: str) -> list[Declaration]:
        """Split one DECLARATION token, recovering from a missing ';' at a line break."""
        text = str(token)
        chunks = _MISSING_SEMICOLON_RE.split(text)
        if len(chunks) > 1:
            self._report(
                "missing-semicolon",
                f"Declaration {text.strip()!r} runs into the next line; missing ';'",
                label,
                token.line,
            )

        declarations: list[Declaration] = []
        line = token.line
        for chunk in chunks:
            decl = self._declaration(chunk, label, line)
            if decl is not None:
                declarations.append(decl)
            line += chunk.count("\n") + 1
        return declarations

    def _declaration(self, chunk: str, label: str, line: int) -> Declaration | None:
        raw = chunk.strip()
        prop, colon, value = raw.partition(":")
        prop = prop.strip().lower()
        value = value.strip()
        if not colon:
            self._report("missing-colon", f"Declaration {raw!r} has no ':'", label, line)
            return None
        if not prop:
            self._report("empty-property", f"Declaration {raw!r} has no property name", label, line)
            return None
        if not value:
            self._report("empty-value", f"Property {prop!r} has no value", label, line)
            return None
        return Declaration(prop=prop, value=value, line=line)

    def _report(
        self,
        rule: str,
        message: str,
        label: str,
        line: int | None,
        severity: Severity = Severity.WARNING,
    ) -> None:
        self.diagnostics.append(
            Diagnostic(
                rule=rule,
                severity=severity,
                message=message,
                selector=label,
                line=line,
            )
        )


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse CSS text into a Stylesheet.

    Malformed declarations are dropped and reported as diagnostics; structural
    problems such as unbalanced braces raise :class:`ParseError`.
    """
    text = _blank_comments(source)
    try:
        tree = _PARSER.parse(text)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(
            f"Malformed stylesheet: {e}",
            line=line if isinstance(line, int) and line > 0 else None,
            column=column if isinstance(column, int) and column > 0 else None,
            cause=e,
        ) from e

    transformer = StylesheetTransformer(text)
    rules: list[Rule] = transformer.transform(tree)
    for diag in transformer.diagnostics:
        if diag.is_warning:
            logger.warning("Stylesheet problem: %s", diag)
        else:
            logger.info("Stylesheet note: %s", diag)
    logger.debug("Parsed %d rule(s)", len(rules))
    return Stylesheet(rules=tuple(rules), diagnostics=tuple(transformer.diagnostics))
