# SPDX-License-Identifier: MIT
"""Content service: the public entry point for resolving content references.

Usage::

    from stowage import get_content_service

    service = get_content_service()
    reader = service.get_reader("File:||images/hero.png")
    writer = service.get_writer_for(page, "file_pointer")
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from .config import get_default_store_type as configured_default_store_type
from .errors import ContentServiceError, InvalidStoreTypeError
from .factory import ContentFactory
from .protocol import ContentReader, ContentWriter, PreferredContentStore
from .reference import format_reference, parse_reference
from .registry import ConventionCatalog, StoreRegistration, StoreRegistry

logger = logging.getLogger("stowage")

DEFAULT_STORE_TYPE = "File"


def default_registrations() -> dict[str, StoreRegistration]:
    """Registrations used when a service is built without any."""
    from .backends.file import FileContentReader, FileContentWriter

    return {"File": StoreRegistration(reader=FileContentReader, writer=FileContentWriter)}


class ContentService:
    """Resolves content references into readers and writers.

    One instance is normally shared by the whole process (see
    :func:`get_content_service`).  Its registrations and default store type
    are replaced wholesale; a replacement affects later resolutions only.

    Args:
        default_store_type: Store type used when no reference is given.
        registrations: Store type → constructors.  Defaults to the built-in
            ``File`` backend.
        catalog: Catalog for the naming-convention fallback.
    """

    def __init__(
        self,
        default_store_type: str = DEFAULT_STORE_TYPE,
        registrations: Mapping[str, StoreRegistration] | None = None,
        catalog: ConventionCatalog | None = None,
    ) -> None:
        if not default_store_type:
            raise InvalidStoreTypeError(default_store_type)
        self._lock = threading.Lock()
        self._default_store_type = default_store_type
        if registrations is None:
            registrations = default_registrations()
        self._catalog = catalog
        self._factory = ContentFactory(StoreRegistry(registrations, catalog))

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def get_default_store_type(self) -> str:
        return self._default_store_type

    def set_default_store_type(self, store_type: str) -> None:
        if not store_type:
            raise InvalidStoreTypeError(store_type)
        with self._lock:
            self._default_store_type = store_type
        logger.info("Default content store set to %r", store_type)

    def get_store_registrations(self) -> Mapping[str, StoreRegistration]:
        """Read-only view of the current registrations."""
        return self._factory.registry.registrations

    def set_store_registrations(self, registrations: Mapping[str, StoreRegistration]) -> None:
        """Replace every registration at once.

        The new table is built before it is swapped in, so concurrent
        resolutions see either the old table or the new one.  Setters
        serialize on the service lock; resolutions never take it.
        """
        factory = ContentFactory(StoreRegistry(registrations, self._catalog))
        with self._lock:
            self._factory = factory
        logger.info("Content store registrations replaced: %s", sorted(registrations))

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def get_reader(self, reference: str | None = None) -> ContentReader:
        """Reader for *reference*, or for the default store when omitted."""
        store_type, local_id = parse_reference(reference or self._default_store_type)
        return self._factory.create("reader", store_type, local_id)

    def get_writer(self, reference: str | None = None) -> ContentWriter:
        """Writer for *reference*, or for the default store when omitted."""
        store_type, local_id = parse_reference(reference or self._default_store_type)
        return self._factory.create("writer", store_type, local_id)

    def get_writer_for(
        self,
        entity: Any = None,
        field: str = "file_pointer",
        explicit_type: str | None = None,
    ) -> ContentWriter:
        """Writer for the content held (or about to be held) by *entity*.

        If ``entity.<field>`` already references readable content, the writer
        comes from that content's reader so edits stay in the same store.
        Otherwise a fresh writer is created for, in order of preference,
        *explicit_type*, the entity's :class:`PreferredContentStore` choice,
        or the default store type.
        """
        current = getattr(entity, field, None) if entity is not None and field else None
        if isinstance(current, str) and current:
            try:
                reader = self.get_reader(current)
            except ContentServiceError as exc:
                logger.warning("Ignoring stored reference %r: %s", current, exc)
            else:
                if reader.is_readable():
                    return reader.get_writer()

        store_type = explicit_type
        if not store_type:
            if isinstance(entity, PreferredContentStore):
                store_type = entity.effective_content_store()
            else:
                store_type = self._default_store_type

        # no underlying content yet
        return self.get_writer(store_type)

    def find_reader_for(self, store_type: str, asset_name: str, remap_to_id: bool = True) -> ContentReader | None:
        """Reader for *asset_name* in *store_type*, or ``None`` if it does not exist.

        Args:
            store_type: Store to look in.
            asset_name: Asset to look up.
            remap_to_id: Let the store's writer map the name to its own local
                id.  Pass ``False`` when *asset_name* is already a local id.
        """
        writer = self.get_writer(store_type)
        local_id = writer.name_to_id(asset_name) if remap_to_id else asset_name
        reader = self.get_reader(format_reference(store_type, local_id))
        if not reader.is_readable():
            logger.debug("No readable content for %r in store %r", asset_name, store_type)
            return None
        return reader


@lru_cache(maxsize=1)
def get_content_service() -> ContentService:
    """Return the process-wide :class:`ContentService` (cached singleton).

    Configuration
    -------------
    ``STOWAGE_DEFAULT_STORE``
        Default store type, ``"File"`` when unset.
    ``STOWAGE_FILE_PATH``
        Root directory of the built-in ``File`` backend.
    """
    return ContentService(default_store_type=configured_default_store_type())
