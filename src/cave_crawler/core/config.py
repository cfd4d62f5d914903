"""Configuration management for Cave Crawler.

Settings are built with pydantic-settings and can be overridden through
environment variables or a ``.env`` file. The game numbers that vary between
editions of the rules (initiative divisor, damage divisor, rewards) live here
so they can be tuned without touching the engine.

Example:
    >>> from cave_crawler.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.combat.initiative_divisor
    2

Environment Variables:
    CAVE_CRAWLER_DATA_PATH: Directory holding item, monster and string data
    CAVE_CRAWLER_LOCALE: Locale of the string table (default ``en``)
    CAVE_CRAWLER_COMBAT_INITIATIVE_DIVISOR: Initiative divisor K
    CAVE_CRAWLER_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cave_crawler.core.exceptions import ConfigurationError


DEFAULT_DATA_PATH = Path(__file__).resolve().parent.parent / "data"


class ContentSettings(BaseSettings):
    """Configuration for static game content.

    Attributes:
        data_path: Directory with ``items/``, ``monsters/`` and ``strings/``.
        locale: Locale of the string table to load.
    """

    model_config = SettingsConfigDict(
        env_prefix="CAVE_CRAWLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_path: Path = Field(
        default=DEFAULT_DATA_PATH,
        description="Directory holding catalog and string data",
    )
    locale: str = Field(
        default="en",
        min_length=2,
        description="Locale of the string table",
    )

    @field_validator("data_path", mode="after")
    @classmethod
    def ensure_directory_exists(cls, value: Path) -> Path:
        """Reject a data path that does not point at a directory.

        Raises:
            ConfigurationError: If the directory does not exist.
        """
        if not value.is_dir():
            raise ConfigurationError(
                f"Content directory does not exist: {value}",
                config_key="data_path",
            )
        return value


class GenerationSettings(BaseSettings):
    """Configuration for cave generation.

    Attributes:
        max_loot_items: Largest number of distinct items in one cave.
        max_cave_gold: Exclusive upper bound of cave gold.
        easy_monster_roll: Upper bound of the monster-count roll on easy caves.
        hard_monster_roll: Upper bound of the monster-count roll on hard caves.
    """

    model_config = SettingsConfigDict(
        env_prefix="CAVE_CRAWLER_GENERATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_loot_items: int = Field(default=4, ge=1, description="Most items per cave")
    max_cave_gold: int = Field(default=200, ge=1, description="Exclusive gold bound")
    easy_monster_roll: float = Field(default=500.0, gt=0, description="Easy roll bound")
    hard_monster_roll: float = Field(default=1000.0, gt=0, description="Hard roll bound")

    @model_validator(mode="after")
    def validate_monster_rolls(self) -> "GenerationSettings":
        """Ensure hard caves never roll fewer monsters than easy ones.

        Raises:
            ConfigurationError: If hard_monster_roll < easy_monster_roll.
        """
        if self.hard_monster_roll < self.easy_monster_roll:
            raise ConfigurationError(
                f"hard_monster_roll ({self.hard_monster_roll}) must not be less than "
                f"easy_monster_roll ({self.easy_monster_roll})",
                config_key="hard_monster_roll",
            )
        return self


class CombatSettings(BaseSettings):
    """Configuration for encounter resolution.

    Attributes:
        initiative_divisor: K in ``player_level / (monster_level * K)``.
        monster_damage_divisor: Monster level divisor for the damage floor.
        min_monster_damage: Smallest damage a monster can roll.
        retreat_chance: Chance to escape a difficult monster.
        difficult_level_ratio: Level ratio a monster must exceed to be difficult.
        difficult_level_gap: Level gap a monster must exceed to be difficult.
        defense_reduction_per_100: Damage fraction removed per 100 defense.
        base_cave_xp: Experience for surviving any cave.
        xp_per_monster_level: Experience per level of a monster fought.
    """

    model_config = SettingsConfigDict(
        env_prefix="CAVE_CRAWLER_COMBAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    initiative_divisor: int = Field(default=2, ge=1, le=10)
    monster_damage_divisor: int = Field(default=10, ge=1)
    min_monster_damage: int = Field(default=2, ge=1)
    retreat_chance: float = Field(default=0.20, ge=0.0, le=1.0)
    difficult_level_ratio: int = Field(default=3, ge=1)
    difficult_level_gap: int = Field(default=10, ge=0)
    defense_reduction_per_100: float = Field(default=0.12, ge=0.0, le=1.0)
    base_cave_xp: int = Field(default=500, ge=0)
    xp_per_monster_level: int = Field(default=20, ge=0)


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        log_level: Application logging level.
        json_logs: Render logs as JSON.
        log_file: Optional file receiving standard-library log records.
        content: Static content settings.
        generation: Cave generation settings.
        combat: Encounter resolution settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="CAVE_CRAWLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level",
    )
    json_logs: bool = Field(default=False, description="Render logs as JSON")
    log_file: str | None = Field(default=None, description="Optional log file")

    content: ContentSettings = Field(default_factory=ContentSettings)
    generation: GenerationSettings = Field(default_factory=GenerationSettings)
    combat: CombatSettings = Field(default_factory=CombatSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "DEFAULT_DATA_PATH",
    "ContentSettings",
    "GenerationSettings",
    "CombatSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
