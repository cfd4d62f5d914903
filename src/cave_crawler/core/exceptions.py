"""Custom exception hierarchy for Cave Crawler.

All exceptions inherit from CaveCrawlerError, so the CLI can report any
application failure in one place while callers inside the engine still catch
the narrow type they care about.

Two classes of failure exist:

* Fatal: a broken catalog (``CatalogLoadError``), a reference to an entry the
  catalog never loaded (``MissingCatalogEntryError``) or content that makes
  generation impossible (``GenerationError``). These propagate.
* Recoverable: removing an item that is not held (``ItemNotFoundError``).

Example:
    >>> from cave_crawler.core.exceptions import CatalogLoadError
    >>> raise CatalogLoadError("Malformed item file", source="items/armor.json")
"""

from __future__ import annotations

from typing import Any


class CaveCrawlerError(Exception):
    """Base exception for all Cave Crawler errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Catalog Exceptions
# =============================================================================


class CatalogError(CaveCrawlerError):
    """Base exception for content catalog errors."""


class CatalogLoadError(CatalogError):
    """Raised when a catalog source is missing, unreadable or malformed.

    Loading is all-or-nothing per source: nothing from a failing file is
    inserted into the catalog.
    """

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize catalog load error with source context.

        Args:
            message: Human-readable error description.
            source: Path of the data source that failed to load.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if source:
            combined_details["source"] = source
        super().__init__(message, details=combined_details)


class MissingCatalogEntryError(CatalogError):
    """Raised when gameplay references an id the catalog does not hold.

    The catalog is append-only and fully loaded before play starts, so this
    always indicates a programming error (a stale inventory entry, a typo in
    content). It is never converted into a fallback value.
    """

    def __init__(
        self,
        message: str,
        *,
        entry_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if entry_id:
            combined_details["entry_id"] = entry_id
        super().__init__(message, details=combined_details)


# =============================================================================
# Game Engine Exceptions
# =============================================================================


class GameEngineError(CaveCrawlerError):
    """Base exception for cave generation and encounter resolution errors."""


class GenerationError(GameEngineError):
    """Raised when a random draw cannot be made.

    This covers empty numeric ranges and an empty set of eligible monster
    templates when a spawn is required; both are content or configuration
    bugs rather than runtime conditions.
    """

    def __init__(
        self,
        message: str,
        *,
        low: int | float | None = None,
        high: int | float | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize generation error with range context.

        Args:
            message: Human-readable error description.
            low: Lower bound of the offending range.
            high: Upper bound of the offending range.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if low is not None:
            combined_details["low"] = low
        if high is not None:
            combined_details["high"] = high
        super().__init__(message, details=combined_details)


class InvalidGameStateError(GameEngineError):
    """Raised when an operation is attempted in a state that forbids it."""

    def __init__(
        self,
        message: str,
        *,
        current_state: str | None = None,
        expected_states: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if current_state:
            combined_details["current_state"] = current_state
        if expected_states:
            combined_details["expected_states"] = expected_states
        super().__init__(message, details=combined_details)


# =============================================================================
# Inventory Exceptions
# =============================================================================


class InventoryError(CaveCrawlerError):
    """Base exception for inventory operations."""


class ItemNotFoundError(InventoryError):
    """Raised when removing an item the inventory does not hold.

    Callers are expected to catch this; it never leaves the inventory in a
    modified state.
    """

    def __init__(
        self,
        message: str,
        *,
        item_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if item_id:
            combined_details["item_id"] = item_id
        super().__init__(message, details=combined_details)


# =============================================================================
# Configuration & Localization Exceptions
# =============================================================================


class ConfigurationError(CaveCrawlerError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class StringsError(CaveCrawlerError):
    """Raised when a localization key cannot be resolved."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if key:
            combined_details["key"] = key
        super().__init__(message, details=combined_details)


__all__ = [
    # Base exception
    "CaveCrawlerError",
    # Catalog exceptions
    "CatalogError",
    "CatalogLoadError",
    "MissingCatalogEntryError",
    # Game engine exceptions
    "GameEngineError",
    "GenerationError",
    "InvalidGameStateError",
    # Inventory exceptions
    "InventoryError",
    "ItemNotFoundError",
    # Configuration exceptions
    "ConfigurationError",
    "StringsError",
]
