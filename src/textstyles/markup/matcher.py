"""Regular-expression recognizer for inline markup tags."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

__all__ = ["TAG_RE", "Tag", "TagKind", "looks_like_markup", "iter_tags", "split_markup"]

# <name>, <name attr="v" flag>, <name/>, </name>
TAG_RE = re.compile(
    r"<(?P<closing>/)?(?P<name>\w+)"
    r"(?P<attrs>(?:\s+\w+(?:\s*=\s*(?:\".*?\"|'.*?'|[^'\">\s]+))?)+\s*|\s*)"
    r"(?P<self_closing>/)?>"
)


class TagKind(Enum):
    OPEN = "open"
    CLOSE = "close"
    SELF_CLOSING = "self-closing"


@dataclass(frozen=True)
class Tag:
    """A tag located in raw input; ``start``/``end`` index the raw text."""

    name: str
    kind: TagKind
    start: int
    end: int
    attrs: str = ""


def looks_like_markup(text: str | None) -> bool:
    """Return True if *text* contains at least one recognizable tag."""
    return bool(text) and TAG_RE.search(text) is not None  # type: ignore[arg-type]


def _to_tag(match: re.Match[str]) -> Tag:
    if match.group("closing"):
        kind = TagKind.CLOSE
    elif match.group("self_closing"):
        kind = TagKind.SELF_CLOSING
    else:
        kind = TagKind.OPEN
    return Tag(
        name=match.group("name"),
        kind=kind,
        start=match.start(),
        end=match.end(),
        attrs=match.group("attrs").strip(),
    )


def iter_tags(text: str) -> Iterator[Tag]:
    for match in TAG_RE.finditer(text):
        yield _to_tag(match)


def split_markup(text: str) -> Iterator[str | Tag]:
    """Yield literal text segments and Tags in input order; empty segments are skipped."""
    pos = 0
    for match in TAG_RE.finditer(text):
        if match.start() > pos:
            yield text[pos : match.start()]
        yield _to_tag(match)
        pos = match.end()
    if pos < len(text):
        yield text[pos:]
