"""Terminal presentation built on rich."""

from __future__ import annotations

from cave_crawler.ui.console import ConsoleDisplay
from cave_crawler.ui.theme import Colors, commas, styled


__all__ = [
    "ConsoleDisplay",
    "Colors",
    "commas",
    "styled",
]
