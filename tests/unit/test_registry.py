# SPDX-License-Identifier: MIT
"""Unit tests for StoreRegistry and the naming-convention catalog."""

import pytest

from stowage.backends.file import FileContentReader, FileContentWriter
from stowage.errors import StoreNotFoundError
from stowage.registry import ConventionCatalog, StoreRegistration, StoreRegistry, default_catalog


class DummyReader:
    def __init__(self, local_id, store_type):
        self.local_id = local_id
        self.store_type = store_type


class DummyWriter(DummyReader):
    pass


@pytest.fixture
def foo_catalog(catalog):
    """Catalog holding FooContentReader / FooContentWriter."""

    @catalog.register
    class FooContentReader(DummyReader):
        pass

    @catalog.register
    class FooContentWriter(DummyWriter):
        pass

    return catalog


@pytest.mark.unit
class TestExplicitRegistrations:
    def test_lookup_returns_registration(self, catalog):
        reg = StoreRegistration(reader=DummyReader, writer=DummyWriter)
        registry = StoreRegistry({"Dummy": reg}, catalog)
        assert registry.lookup("Dummy") is reg

    def test_resolve_each_side(self, catalog):
        registry = StoreRegistry({"Dummy": StoreRegistration(reader=DummyReader, writer=DummyWriter)}, catalog)
        assert registry.resolve("Dummy", "reader") is DummyReader
        assert registry.resolve("Dummy", "writer") is DummyWriter

    def test_explicit_wins_over_convention(self, foo_catalog):
        reg = StoreRegistration(reader=DummyReader, writer=DummyWriter)
        registry = StoreRegistry({"Foo": reg}, foo_catalog)
        assert registry.resolve("Foo", "reader") is DummyReader

    def test_registrations_are_read_only(self, catalog):
        registry = StoreRegistry({"Dummy": StoreRegistration(reader=DummyReader, writer=DummyWriter)}, catalog)
        with pytest.raises(TypeError):
            registry.registrations["Other"] = StoreRegistration(reader=DummyReader, writer=DummyWriter)  # type: ignore[index]

    def test_source_mapping_is_copied(self, catalog):
        source = {"Dummy": StoreRegistration(reader=DummyReader, writer=DummyWriter)}
        registry = StoreRegistry(source, catalog)
        source.clear()
        assert "Dummy" in registry.registrations


@pytest.mark.unit
class TestConventionFallback:
    def test_resolves_by_name(self, foo_catalog):
        registry = StoreRegistry({}, foo_catalog)
        reg = registry.lookup("Foo")
        assert reg.reader.__name__ == "FooContentReader"
        assert reg.writer.__name__ == "FooContentWriter"

    def test_reader_only_store(self, catalog):
        @catalog.register
        class BarContentReader(DummyReader):
            pass

        registry = StoreRegistry({}, catalog)
        assert registry.resolve("Bar", "reader") is BarContentReader
        with pytest.raises(StoreNotFoundError):
            registry.resolve("Bar", "writer")
        with pytest.raises(StoreNotFoundError):
            registry.lookup("Bar")

    def test_unknown_store_type(self, catalog):
        registry = StoreRegistry({}, catalog)
        with pytest.raises(StoreNotFoundError) as exc_info:
            registry.lookup("Nope")
        assert exc_info.value.store_type == "Nope"
        assert isinstance(exc_info.value, LookupError)

    def test_default_catalog_used_when_none_given(self):
        registry = StoreRegistry()
        assert registry.catalog is default_catalog
        assert registry.lookup("File") == StoreRegistration(reader=FileContentReader, writer=FileContentWriter)


@pytest.mark.unit
class TestConventionCatalog:
    def test_register_returns_class(self):
        catalog = ConventionCatalog()

        class BazContentWriter(DummyWriter):
            pass

        assert catalog.register(BazContentWriter) is BazContentWriter
        assert "BazContentWriter" in catalog
        assert catalog.get("BazContentWriter") is BazContentWriter

    def test_rejects_unconventional_name(self):
        catalog = ConventionCatalog()
        with pytest.raises(ValueError, match="must end with"):
            catalog.register(DummyReader)

    def test_missing_name(self):
        assert ConventionCatalog().get("QuxContentReader") is None

    def test_file_backend_is_registered(self):
        assert default_catalog.get("FileContentReader") is FileContentReader
        assert default_catalog.get("FileContentWriter") is FileContentWriter
