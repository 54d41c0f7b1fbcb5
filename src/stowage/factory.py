# SPDX-License-Identifier: MIT
"""Reader/writer construction.

The factory turns a resolved store type and optional local id into a live
backend object.  Backends are built fresh on every call; nothing is cached.
"""

from __future__ import annotations

import logging
from typing import Literal, overload

from .errors import InvalidStoreTypeError
from .protocol import ContentKind, ContentReader, ContentWriter
from .registry import StoreRegistry

logger = logging.getLogger("stowage")


class ContentFactory:
    """Instantiates backends through a :class:`StoreRegistry`."""

    def __init__(self, registry: StoreRegistry) -> None:
        self.registry = registry

    @overload
    def create(self, kind: Literal["reader"], store_type: str, local_id: str | None = None) -> ContentReader: ...

    @overload
    def create(self, kind: Literal["writer"], store_type: str, local_id: str | None = None) -> ContentWriter: ...

    def create(self, kind: ContentKind, store_type: str, local_id: str | None = None) -> ContentReader | ContentWriter:
        """Build a *kind* backend for *store_type*, passing ``(local_id, store_type)``.

        Exceptions raised by the backend constructor propagate unchanged.

        Raises:
            InvalidStoreTypeError: If *store_type* is empty.
            StoreNotFoundError: If the registry has no backend for *store_type*.
        """
        if not store_type:
            raise InvalidStoreTypeError(store_type)

        ctor = self.registry.resolve(store_type, kind)
        logger.debug("Creating %s for store %r (local id %r)", kind, store_type, local_id)
        return ctor(local_id, store_type)
