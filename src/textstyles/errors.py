"""Error hierarchy for stylesheet parsing, style building and markup conversion."""
from __future__ import annotations


class TextStyleError(Exception):
    """Base error for all textstyles errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ParseError(TextStyleError):
    """Raised when stylesheet source is structurally malformed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        self.line = line
        self.column = column
        super().__init__(message, cause=cause)


class CoercionError(TextStyleError):
    """A strict property (float scalar or keyword) was given an unusable value."""

    def __init__(self, prop: str, value: str, reason: str = "") -> None:
        self.prop = prop
        self.value = value
        message = f"Cannot coerce {value!r} for property {prop!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class MultipleRulesError(TextStyleError):
    """``merge_single_rule`` was handed anything other than exactly one rule."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"Only a single CSS rule may be merged at a time (got {count})"
        )


class UnresolvedSelectorError(TextStyleError, LookupError):
    """A selector required for conversion is not present in the style table."""

    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(f"Selector not found in style table: {selector!r}")
