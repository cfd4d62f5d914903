"""Terminal palette.

Rich style strings used by the console display. The engine never imports
this module.
"""

from __future__ import annotations


class Colors:
    """Styles for the parts of a message that carry game meaning."""

    MONSTER = "bold red"
    DAMAGE = "red"
    XP = "bright_cyan"
    GOLD = "yellow"
    ITEM = "bright_white"
    POTION = "magenta"

    INPUT = "bright_blue"
    LOW_PRIORITY = "bright_black"
    SELECTED = "bold bright_blue"

    SUCCESS = "green"
    DEATH = "bold red"


def styled(text: str, style: str) -> str:
    """Wrap ``text`` in rich markup for ``style``."""
    return f"[{style}]{text}[/]"


def commas(amount: int) -> str:
    """Format an integer with thousands separators, e.g. 6000 -> '6,000'."""
    return f"{amount:,}"


__all__ = [
    "Colors",
    "styled",
    "commas",
]
