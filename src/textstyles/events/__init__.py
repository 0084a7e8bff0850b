"""Event system: bus and notification types for style table changes."""

from textstyles.events.bus import EventBus
from textstyles.events.types import StylesChanged, StylesheetRejected

__all__ = ["EventBus", "StylesChanged", "StylesheetRejected"]
