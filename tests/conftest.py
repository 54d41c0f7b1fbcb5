# SPDX-License-Identifier: MIT
"""Shared pytest fixtures for stowage tests."""

import pathlib
from functools import partial

import pytest

from stowage.config import get_file_root
from stowage.registry import ConventionCatalog, StoreRegistration
from stowage.service import ContentService, get_content_service


class MemoryContentWriter:
    """In-memory writer; local ids are lowercased, dash-separated asset names."""

    def __init__(self, local_id, store_type, *, blobs):
        self.local_id = local_id
        self.store_type = store_type
        self.blobs = blobs

    def name_to_id(self, asset_name):
        return asset_name.strip().lower().replace(" ", "-")

    def write(self, data, name=None):
        if name is not None:
            self.local_id = self.name_to_id(name)
        self.blobs[self.local_id] = data


class MemoryContentReader:
    def __init__(self, local_id, store_type, *, blobs):
        self.local_id = local_id
        self.store_type = store_type
        self.blobs = blobs

    def is_readable(self):
        return self.local_id is not None and self.local_id in self.blobs

    def get_writer(self):
        return MemoryContentWriter(self.local_id, self.store_type, blobs=self.blobs)


@pytest.fixture
def blobs() -> dict[str, bytes]:
    """Backing dict shared by every memory reader/writer of a test."""
    return {}


@pytest.fixture
def memory_registration(blobs) -> StoreRegistration:
    return StoreRegistration(
        reader=partial(MemoryContentReader, blobs=blobs),
        writer=partial(MemoryContentWriter, blobs=blobs),
    )


@pytest.fixture
def catalog() -> ConventionCatalog:
    """Empty catalog so conventional classes from one test never leak into another."""
    return ConventionCatalog()


@pytest.fixture
def service(memory_registration, catalog) -> ContentService:
    """Service defaulting to the in-memory ``Memory`` store."""
    return ContentService("Memory", {"Memory": memory_registration}, catalog=catalog)


@pytest.fixture
def tmp_content_path(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create a temporary root directory for the File backend."""
    content_path = tmp_path / "content"
    content_path.mkdir()
    return content_path


@pytest.fixture(autouse=True)
def clear_config_caches():
    """Clear cached configuration so env changes in one test never leak."""
    get_file_root.cache_clear()
    get_content_service.cache_clear()
    yield
    get_file_root.cache_clear()
    get_content_service.cache_clear()
