# SPDX-License-Identifier: MIT
"""Capability contracts for content backends and owning entities.

Backends are constructed with ``(local_id, store_type)`` and must satisfy
:class:`ContentReader` or :class:`ContentWriter`.  Anything else a backend
offers (byte I/O, URLs, deletion) is its own business.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Literal, Protocol, runtime_checkable

ContentKind = Literal["reader", "writer"]
"""Which side of a store registration a factory call targets."""


@runtime_checkable
class ContentWriter(Protocol):
    """Writes content into one backend, optionally bound to an existing item."""

    def name_to_id(self, asset_name: str) -> str:
        """Map a human-facing asset name to the backend's canonical local id."""
        ...


@runtime_checkable
class ContentReader(Protocol):
    """Reads one piece of content from one backend."""

    def is_readable(self) -> bool:
        """Whether the bound content currently exists and can be read."""
        ...

    def get_writer(self) -> ContentWriter:
        """Return a writer bound to the same underlying content as this reader."""
        ...


ReaderFactory = Callable[[str | None, str], ContentReader]
WriterFactory = Callable[[str | None, str], ContentWriter]


class PreferredContentStore(ABC):
    """Opt-in interface for entities that choose their own store type.

    Entities either subclass this or are registered with
    ``PreferredContentStore.register(SomeModel)``.
    """

    @abstractmethod
    def effective_content_store(self) -> str:
        """Store type new content for this entity should be written to."""
