# SPDX-License-Identifier: MIT
"""Store type → backend constructor lookup.

Explicit registrations win.  When a store type has no registration, the
registry falls back to the naming convention ``<type>ContentReader`` /
``<type>ContentWriter`` looked up in a :class:`ConventionCatalog`, an explicit
table that backend classes join through :func:`content_backend`.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeVar

from .errors import StoreNotFoundError
from .protocol import ContentKind, ReaderFactory, WriterFactory

logger = logging.getLogger("stowage")

_SUFFIXES: dict[ContentKind, str] = {
    "reader": "ContentReader",
    "writer": "ContentWriter",
}

T = TypeVar("T", bound=type)


@dataclass(frozen=True)
class StoreRegistration:
    """Reader and writer constructors for one store type."""

    reader: ReaderFactory
    writer: WriterFactory


class ConventionCatalog:
    """Named backend classes available to the naming-convention fallback."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._classes: dict[str, type] = {}

    def register(self, cls: T) -> T:
        """Class decorator adding *cls* under its own ``__name__``."""
        name = cls.__name__
        if not name.endswith(tuple(_SUFFIXES.values())):
            raise ValueError(f"{name} must end with 'ContentReader' or 'ContentWriter'")
        with self._lock:
            self._classes = {**self._classes, name: cls}
        logger.debug("Registered conventional content backend %s", name)
        return cls

    def get(self, name: str) -> type | None:
        return self._classes.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._classes


default_catalog = ConventionCatalog()
"""Catalog consulted by registries that are not given one explicitly."""

content_backend = default_catalog.register


class StoreRegistry:
    """Immutable view over a set of store registrations.

    Replace a registry wholesale rather than mutating it; the mapping handed
    to the constructor is copied.
    """

    def __init__(
        self,
        registrations: Mapping[str, StoreRegistration] | None = None,
        catalog: ConventionCatalog | None = None,
    ) -> None:
        self._registrations: Mapping[str, StoreRegistration] = MappingProxyType(dict(registrations or {}))
        self._catalog = catalog if catalog is not None else default_catalog

    @property
    def registrations(self) -> Mapping[str, StoreRegistration]:
        return self._registrations

    @property
    def catalog(self) -> ConventionCatalog:
        return self._catalog

    def resolve(self, store_type: str, kind: ContentKind) -> ReaderFactory | WriterFactory:
        """Return the *kind* constructor for *store_type*.

        Raises:
            StoreNotFoundError: If neither a registration nor a conventional class exists.
        """
        registration = self._registrations.get(store_type)
        if registration is not None:
            return registration.reader if kind == "reader" else registration.writer

        cls = self._catalog.get(f"{store_type}{_SUFFIXES[kind]}")
        if cls is None:
            raise StoreNotFoundError(store_type)
        logger.debug("Resolved %s for %r by naming convention: %s", kind, store_type, cls.__name__)
        return cls

    def lookup(self, store_type: str) -> StoreRegistration:
        """Return both constructors for *store_type*.

        Raises:
            StoreNotFoundError: If either side cannot be resolved.
        """
        registration = self._registrations.get(store_type)
        if registration is not None:
            return registration
        return StoreRegistration(
            reader=self.resolve(store_type, "reader"),  # type: ignore[arg-type]
            writer=self.resolve(store_type, "writer"),  # type: ignore[arg-type]
        )
