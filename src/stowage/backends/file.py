# SPDX-License-Identifier: MIT
"""Local filesystem content backend (store type ``"File"``).

Local ids are POSIX paths relative to the root from ``STOWAGE_FILE_PATH``.
Tests and embedders can pass ``base_path`` instead, typically through
:func:`functools.partial` in a :class:`~stowage.registry.StoreRegistration`.
"""

from __future__ import annotations

import logging
import pathlib
from collections.abc import AsyncIterator

import aiofiles
import aiofiles.os

from ..config import get_file_root
from ..reference import ContentReference
from ..registry import content_backend
from ..security import check_not_symlink, validate_safe_path

logger = logging.getLogger("stowage")

DEFAULT_CHUNK_SIZE = 64 * 1024


class _FileContent:
    """State shared by the file reader and writer."""

    def __init__(self, local_id: str | None, store_type: str = "File", *, base_path: pathlib.Path | None = None) -> None:
        self.local_id = local_id
        self.store_type = store_type
        self._base_path = base_path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.content_id!r})"

    @property
    def reference(self) -> ContentReference:
        return ContentReference(store_type=self.store_type, local_id=self.local_id)

    @property
    def content_id(self) -> str:
        """Reference string identifying the bound content."""
        return str(self.reference)

    def _base(self) -> pathlib.Path:
        if self._base_path is not None:
            return self._base_path
        return get_file_root()

    def _target(self, *, allow_create: bool) -> pathlib.Path:
        if not self.local_id:
            raise ValueError(f"{type(self).__name__} is not bound to any content")
        check_not_symlink(self._base() / self.local_id, "content file")
        return validate_safe_path(self._base(), self.local_id, allow_create=allow_create)


@content_backend
class FileContentReader(_FileContent):
    """Reads one file below the content root."""

    @property
    def path(self) -> pathlib.Path:
        return self._target(allow_create=True)

    def is_readable(self) -> bool:
        try:
            return self._target(allow_create=False).is_file()
        except ValueError:
            return False

    def get_writer(self) -> FileContentWriter:
        return FileContentWriter(self.local_id, self.store_type, base_path=self._base_path)

    async def read(self) -> bytes:
        """Read the entire file.

        Raises:
            ValueError: If the file is missing, a symlink, or outside the root.
        """
        async with aiofiles.open(self._target(allow_create=False), "rb") as f:
            return await f.read()

    async def stream(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> AsyncIterator[bytes]:
        """Yield the file in chunks of at most *chunk_size* bytes."""
        async with aiofiles.open(self._target(allow_create=False), "rb") as f:
            while chunk := await f.read(chunk_size):
                yield chunk


@content_backend
class FileContentWriter(_FileContent):
    """Writes one file below the content root.

    A writer created without a local id is bound on its first write.
    """

    def __init__(
        self, local_id: str | None = None, store_type: str = "File", *, base_path: pathlib.Path | None = None
    ) -> None:
        super().__init__(local_id, store_type, base_path=base_path)

    def name_to_id(self, asset_name: str) -> str:
        """Normalize *asset_name* to a relative POSIX path.

        Examples::

            >>> FileContentWriter().name_to_id("/images\\\\hero.png")
            'images/hero.png'
        """
        local_id = pathlib.PurePosixPath(asset_name.replace("\\", "/").lstrip("/")).as_posix()
        if local_id in ("", "."):
            raise ValueError(f"Invalid asset name: {asset_name!r}")
        return local_id

    def get_reader(self) -> FileContentReader:
        return FileContentReader(self.local_id, self.store_type, base_path=self._base_path)

    def _prepare(self, name: str | None) -> pathlib.Path:
        if name is not None:
            self.local_id = self.name_to_id(name)
        path = self._target(allow_create=True)
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    async def write(self, data: bytes, name: str | None = None) -> str:
        """Write *data*, binding to *name* first when given.

        Returns:
            The content id of the written file.
        """
        path = self._prepare(name)
        async with aiofiles.open(path, "wb") as f:
            await f.write(data)
        logger.debug("Wrote %d bytes to %s", len(data), path)
        return self.content_id

    async def write_stream(self, chunks: AsyncIterator[bytes], name: str | None = None) -> str:
        """Write from an async byte-chunk stream. Returns the content id."""
        path = self._prepare(name)
        async with aiofiles.open(path, "wb") as f:
            async for chunk in chunks:
                await f.write(chunk)
        return self.content_id

    async def delete(self) -> bool:
        """Remove the bound file. Returns ``False`` if it did not exist."""
        try:
            await aiofiles.os.remove(self._target(allow_create=True))
        except FileNotFoundError:
            return False
        logger.debug("Deleted %s", self.content_id)
        return True
