"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        CaveCrawlerError: Base exception for all application errors.
        CatalogLoadError: Catalog source could not be loaded.
        MissingCatalogEntryError: Gameplay referenced an unknown id.
        GenerationError: A random draw was impossible.
        ItemNotFoundError: Removing an item that is not held.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from cave_crawler.core.config import (
    CombatSettings,
    ContentSettings,
    GenerationSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from cave_crawler.core.exceptions import (
    CatalogError,
    CatalogLoadError,
    CaveCrawlerError,
    ConfigurationError,
    GameEngineError,
    GenerationError,
    InvalidGameStateError,
    InventoryError,
    ItemNotFoundError,
    MissingCatalogEntryError,
    StringsError,
)
from cave_crawler.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "CaveCrawlerError",
    "CatalogError",
    "CatalogLoadError",
    "MissingCatalogEntryError",
    "GameEngineError",
    "GenerationError",
    "InvalidGameStateError",
    "InventoryError",
    "ItemNotFoundError",
    "ConfigurationError",
    "StringsError",
    # Configuration
    "Settings",
    "ContentSettings",
    "GenerationSettings",
    "CombatSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
