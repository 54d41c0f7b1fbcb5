# SPDX-License-Identifier: MIT
"""Pluggable content storage for stowage.

Applications store a short content reference (``"File:||images/hero.png"``)
instead of the content itself.  The content service maps that reference to
the backend holding it and hands back a reader or writer bound to it, so the
storage medium can change without touching callers.

Usage::

    from stowage import get_content_service

    service = get_content_service()
    reader = service.get_reader("File:||images/hero.png")
    if reader.is_readable():
        data = await reader.read()
"""

from .errors import ContentServiceError, InvalidReferenceError, InvalidStoreTypeError, StoreNotFoundError
from .protocol import ContentKind, ContentReader, ContentWriter, PreferredContentStore
from .reference import SEPARATOR, ContentReference, format_reference, parse_reference
from .registry import ConventionCatalog, StoreRegistration, StoreRegistry, content_backend
from .service import ContentService, get_content_service

__all__ = [
    "SEPARATOR",
    "ContentKind",
    "ContentReader",
    "ContentReference",
    "ContentService",
    "ContentServiceError",
    "ContentWriter",
    "ConventionCatalog",
    "InvalidReferenceError",
    "InvalidStoreTypeError",
    "PreferredContentStore",
    "StoreNotFoundError",
    "StoreRegistration",
    "StoreRegistry",
    "content_backend",
    "format_reference",
    "get_content_service",
    "parse_reference",
]
