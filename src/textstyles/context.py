"""StyleContext: the explicitly owned, thread-safe holder of the active style table."""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Mapping

from textstyles.config import TextStylesConfig
from textstyles.errors import CoercionError, ParseError, UnresolvedSelectorError
from textstyles.events import EventBus, StylesChanged, StylesheetRejected
from textstyles.markup.converter import Conversion, TagOverride, convert, style_text
from textstyles.markup.matcher import looks_like_markup
from textstyles.model.diagnostic import Diagnostic
from textstyles.style.builder import (
    StyleTable,
    build_style_table,
    merge_single_rule,
    to_css_string,
)
from textstyles.style.record import StyleRecord
from textstyles.stylesheet import parse_stylesheet

logger = logging.getLogger(__name__)


class StyleContext:
    """Owns one active style table and replaces it wholesale.

    Writers build a complete new table before swapping it in under the lock,
    so a conversion always works against one consistent snapshot. A failed
    replacement leaves the previous table active.
    """

    def __init__(
        self,
        config: TextStylesConfig | None = None,
        bus: EventBus | None = None,
    ) -> None:
        self.config = config or TextStylesConfig()
        self.bus = bus or EventBus()
        self._lock = threading.Lock()
        self._table: StyleTable = {}
        self._generation = 0

    # --- replacement ----------------------------------------------------------

    def set_stylesheet(self, css: str) -> list[Diagnostic]:
        """Parse *css*, build its table and make it active.

        Returns the diagnostics found while parsing. Raises
        :class:`ParseError` or :class:`CoercionError` without touching the
        active table.
        """
        try:
            stylesheet = parse_stylesheet(css)
            table = build_style_table(stylesheet)
        except (ParseError, CoercionError) as exc:
            logger.warning("Stylesheet rejected: %s", exc)
            self.bus.emit(StylesheetRejected(generation=self.generation, error=str(exc)))
            raise
        self.set_styles(table)
        return list(stylesheet.diagnostics)

    def set_styles(self, table: Mapping[str, StyleRecord]) -> None:
        """Make *table* the active style table."""
        new_table = {name: record.clone() for name, record in table.items()}
        with self._lock:
            self._table = new_table
            self._generation += 1
            generation = self._generation
        logger.info("Style table replaced: generation=%d selectors=%d", generation, len(new_table))
        self.bus.emit(StylesChanged(generation=generation, selectors=tuple(new_table)))

    # --- reading --------------------------------------------------------------

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def _snapshot(self) -> StyleTable:
        with self._lock:
            return self._table

    def styles(self) -> StyleTable:
        """Return a copy of the active table; its records are copies too."""
        return {name: record.clone() for name, record in self._snapshot().items()}

    def selectors(self) -> list[str]:
        return list(self._snapshot())

    def get_style(self, selector: str) -> StyleRecord | None:
        """Return a copy of *selector*'s style, or None.

        Changes to the copy never reach the active table; publish them with
        :meth:`set_styles`.
        """
        style = self._snapshot().get(selector)
        return None if style is None else style.clone()

    def __contains__(self, selector: str) -> bool:
        return selector in self._snapshot()

    # --- styling --------------------------------------------------------------

    def convert(
        self,
        text: str,
        default_selector: str | None = None,
        overrides: Iterable[TagOverride] | None = None,
        *,
        merge_existing_styles: bool | None = None,
    ) -> Conversion:
        """Convert marked-up *text* against the active table."""
        if merge_existing_styles is None:
            merge_existing_styles = self.config.merge_existing_styles
        return convert(
            text,
            self._snapshot(),
            default_selector or self.config.default_selector,
            overrides,
            merge_existing_styles=merge_existing_styles,
            body_tag=self.config.body_tag,
            unescape_entities=self.config.unescape_entities,
        )

    def style_text(
        self, selector: str, text: str, start: int = 0, end: int | None = None
    ) -> Conversion:
        """Style *text* with *selector*; marked-up text is routed through :meth:`convert`."""
        table = self._snapshot()
        style = table.get(selector)
        if style is None:
            raise UnresolvedSelectorError(selector)
        if looks_like_markup(text):
            return convert(
                text,
                table,
                selector,
                body_tag=self.config.body_tag,
                unescape_entities=self.config.unescape_entities,
            )
        return style_text(style.clone(), text, start, end)

    def merge_single_rule(self, selector: str, css: str) -> StyleRecord:
        """Return a copy of *selector*'s style with one rule of *css* layered on top."""
        style = self.get_style(selector)
        if style is None:
            raise UnresolvedSelectorError(selector)
        return merge_single_rule(style, css)

    def to_css_string(self, selector: str) -> str:
        style = self.get_style(selector)
        if style is None:
            raise UnresolvedSelectorError(selector)
        return to_css_string(selector, style)
