"""Tests for resource backends and the backend registry."""

import pytest

from core.resources import (
    ResourceBackend,
    ResourceBackendError,
    available_backends,
    create_loader,
    get_backend,
    register_backend,
)
from core.resources import registry
from core.resources.directory_backend import DirectoryResourceBackend
from core.resources.memory_backend import MemoryResourceBackend
from core.resources.package_backend import PackageResourceBackend


class TestRegistry:
    """Tests for backend registration."""

    @pytest.mark.parametrize(
        "name,cls",
        [
            ("package", PackageResourceBackend),
            ("directory", DirectoryResourceBackend),
            ("memory", MemoryResourceBackend),
        ],
    )
    def test_builtin_backends_registered(self, name, cls):
        assert get_backend(name) is cls

    def test_unknown_backend_lists_available(self):
        with pytest.raises(KeyError) as exc_info:
            get_backend("vault")

        assert "package" in str(exc_info.value)

    def test_create_loader_unknown_backend(self):
        with pytest.raises(ResourceBackendError):
            create_loader("vault")

    def test_create_loader_missing_config(self):
        """Directory backend needs a root."""
        with pytest.raises(ResourceBackendError) as exc_info:
            create_loader("directory")

        assert "directory" in str(exc_info.value)

    def test_create_loader_default_is_package(self):
        assert isinstance(create_loader(), PackageResourceBackend)

    def test_available_backends_sorted(self):
        names = available_backends()

        assert names == sorted(names)
        assert {"directory", "memory", "package"} <= set(names)

    def test_register_rejects_non_backend(self, monkeypatch):
        monkeypatch.setattr(registry, "BACKENDS", dict(registry.BACKENDS))

        with pytest.raises(TypeError):

            @register_backend("plain")
            class Plain:
                pass

        assert "plain" not in registry.BACKENDS

    def test_register_rejects_taken_name(self, monkeypatch):
        """Another class should not take over a registered name."""
        monkeypatch.setattr(registry, "BACKENDS", dict(registry.BACKENDS))

        with pytest.raises(ValueError) as exc_info:

            @register_backend("memory")
            class Impostor(ResourceBackend):
                def open_resource(self, owner_id, resource_name):
                    return None

        assert "MemoryResourceBackend" in str(exc_info.value)
        assert get_backend("memory") is MemoryResourceBackend

    def test_register_new_backend(self, monkeypatch):
        monkeypatch.setattr(registry, "BACKENDS", dict(registry.BACKENDS))

        @register_backend("empty")
        class EmptyBackend(ResourceBackend):
            def open_resource(self, owner_id, resource_name):
                return None

        assert get_backend("empty") is EmptyBackend
        assert create_loader("empty")("mylib", "x.json") is None


class TestPackageResourceBackend:
    """Tests for PackageResourceBackend."""

    def test_relative_name_strips_owner(self):
        assert (
            PackageResourceBackend.relative_name("mylib", "mylib.appsettings.json")
            == "appsettings.json"
        )
        assert PackageResourceBackend.relative_name("mylib", "other.json") == "other.json"

    def test_opens_package_data(self):
        loader = PackageResourceBackend()

        stream = loader("example_settings", "example_settings.appsettings.json")

        with stream:
            assert b"Value1" in stream.read()

    def test_missing_resource_returns_none(self):
        loader = PackageResourceBackend()

        assert loader("example_settings", "example_settings.appsettings.Staging.json") is None

    def test_unknown_package_returns_none(self):
        loader = PackageResourceBackend()

        assert loader("no_such_package_here", "no_such_package_here.appsettings.json") is None

    def test_plain_module_owner_returns_none(self):
        """An owner that is a module, not a package, has no resources."""
        loader = PackageResourceBackend()

        assert loader("json.decoder", "json.decoder.appsettings.json") is None


class TestDirectoryResourceBackend:
    """Tests for DirectoryResourceBackend."""

    def test_opens_file_by_resource_name(self, tmp_path):
        (tmp_path / "mylib.appsettings.json").write_text('{"a": 1}')
        loader = create_loader("directory", root=str(tmp_path))

        with loader("mylib", "mylib.appsettings.json") as stream:
            assert stream.read() == b'{"a": 1}'

    def test_missing_file_returns_none(self, tmp_path):
        loader = DirectoryResourceBackend(str(tmp_path))

        assert loader("mylib", "mylib.appsettings.json") is None


class TestMemoryResourceBackend:
    """Tests for MemoryResourceBackend."""

    def test_serves_bytes_and_text(self):
        backend = MemoryResourceBackend({("mylib", "a.json"): b"{}"})
        backend.add("mylib", "b.json", "{}")

        assert backend("mylib", "a.json").read() == b"{}"
        assert backend("mylib", "b.json").read() == b"{}"

    def test_owner_is_part_of_key(self):
        backend = MemoryResourceBackend({("mylib", "a.json"): b"{}"})

        assert backend("other", "a.json") is None
