from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TextStylesConfig:
    default_selector: str = "body"
    body_tag: str = "body"
    merge_existing_styles: bool = True
    unescape_entities: bool = True
