# SPDX-License-Identifier: MIT
"""Content reference encoding.

A content reference is the string an application stores in place of the
content itself.  It is either a bare store type (``"File"``) or a store type
and a backend-local id joined by :data:`SEPARATOR`::

    >>> format_reference("File", "images/hero.png")
    'File:||images/hero.png'
    >>> parse_reference("File:||images/hero.png")
    ('File', 'images/hero.png')
    >>> parse_reference("File")
    ('File', None)

Neither part may contain the separator, so every reference has exactly one
parse.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from .errors import InvalidReferenceError

SEPARATOR = ":||"
"""Reserved token between the store type and the local id."""


def _check_token(value: str, what: str) -> str:
    if SEPARATOR in value:
        raise InvalidReferenceError(f"{what} may not contain {SEPARATOR!r}: {value!r}")
    return value


def parse_reference(reference: str) -> tuple[str, str | None]:
    """Split *reference* into ``(store_type, local_id)``.

    The store type is not checked against any registry.

    Raises:
        InvalidReferenceError: If the local id part itself contains the separator.
    """
    store_type, sep, local_id = reference.partition(SEPARATOR)
    if not sep:
        return reference, None
    return store_type, _check_token(local_id, "Local id")


def format_reference(store_type: str, local_id: str | None = None) -> str:
    """Join *store_type* and *local_id* into a reference string.

    Exact inverse of :func:`parse_reference`.  A ``None`` local id produces a
    bare store type.

    Raises:
        InvalidReferenceError: If either part contains the separator.
    """
    _check_token(store_type, "Store type")
    if local_id is None:
        return store_type
    return f"{store_type}{SEPARATOR}{_check_token(local_id, 'Local id')}"


class ContentReference(BaseModel, frozen=True):
    """Parsed, immutable form of a reference string."""

    store_type: str
    local_id: str | None = None

    @field_validator("store_type", "local_id")
    @classmethod
    def _no_separator(cls, v: str | None) -> str | None:
        if v is not None and SEPARATOR in v:
            raise ValueError(f"Reference parts may not contain {SEPARATOR!r}: {v!r}")
        return v

    @classmethod
    def parse(cls, reference: str) -> ContentReference:
        store_type, local_id = parse_reference(reference)
        return cls(store_type=store_type, local_id=local_id)

    def __str__(self) -> str:
        return format_reference(self.store_type, self.local_id)
