# SPDX-License-Identifier: MIT
"""Exceptions raised while resolving content references.

Errors raised by a backend's own constructor are not listed here: they reach
the caller unchanged.
"""


class ContentServiceError(Exception):
    """Base class for all stowage resolution errors."""


class InvalidStoreTypeError(ContentServiceError, ValueError):
    """Raised when a reference resolves to an empty store type."""

    def __init__(self, store_type: str | None) -> None:
        self.store_type = store_type
        super().__init__(f"Invalid content store type: {store_type!r}")


class StoreNotFoundError(ContentServiceError, LookupError):
    """Raised when no registration or conventional backend exists for a store type."""

    def __init__(self, store_type: str) -> None:
        self.store_type = store_type
        super().__init__(f"No content store registered for {store_type!r}")


class InvalidReferenceError(ContentServiceError, ValueError):
    """Raised when a store type or local id would make a reference ambiguous."""
