"""Rules constants for Cave Crawler.

These values define the shape of the game rather than its balance, so they
are not exposed through settings.
"""

from __future__ import annotations

# =============================================================================
# Player Progression
# =============================================================================

BASE_HP = 20
"""Maximum hit points of a level 0 player."""

HP_PER_LEVEL = 5
"""Maximum hit points gained per level."""

XP_LEVEL_DIVISOR = 8.0
"""Level is ``round(sqrt(xp) / XP_LEVEL_DIVISOR)``."""

DEFAULT_PLAYER_NAME = "Unnamed"

# =============================================================================
# Rarity Tiers
# =============================================================================

RARITY_LEVEL_RANGES: dict[str, tuple[int, int]] = {
    "petty": (1, 10),
    "common": (10, 30),
    "uncommon": (30, 100),
    "rare": (100, 500),
    "legendary": (500, 1000),
}
"""Half-open monster level range per rarity tier."""

# =============================================================================
# Cave Sessions
# =============================================================================

CAVES_PER_SESSION = 2
"""Caves generated each time the player approaches a new pair of entrances."""

DEFAULT_CAVE_NAMES = ("the left cave", "the right cave")
"""Fallback names when no name pool is supplied."""
