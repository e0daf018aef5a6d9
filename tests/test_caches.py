"""Tests for the disk cache and cache keys."""

from unittest.mock import MagicMock

from surat_ui.lib import objects
from surat_ui.lib.caches import DiskCache


class TestDiskCache:
    """Tests for DiskCache."""

    def test_get_or_load_calls_loader_once(self, tmp_path):
        cache = DiskCache(tmp_path)
        loader = MagicMock(return_value=[1, 2, 3])

        assert cache.get_or_load("k", loader) == [1, 2, 3]
        assert cache.get_or_load("k", loader) == [1, 2, 3]

        loader.assert_called_once()
        cache.close()

    def test_keep_predicate_skips_storing(self, tmp_path):
        cache = DiskCache(tmp_path)
        loader = MagicMock(return_value={"success": False})

        cache.get_or_load("k", loader, keep=lambda value: value["success"])
        cache.get_or_load("k", loader, keep=lambda value: value["success"])

        assert loader.call_count == 2
        assert cache.get("k") is None
        cache.close()

    def test_set_delete_clear(self, tmp_path):
        cache = DiskCache(tmp_path)
        cache.set("a", 1)
        cache.set("b", 2)

        cache.delete("a")
        assert cache.get("a") is None
        assert cache.get("b") == 2

        cache.clear()
        assert cache.get("b") is None
        cache.close()


class TestCacheKey:
    """Tests for objects.cache_key."""

    def test_key_is_stable_across_dict_order(self):
        assert objects.cache_key("GET", {"a": 1, "b": 2}) == objects.cache_key("GET", {"b": 2, "a": 1})

    def test_key_differs_per_user(self):
        assert objects.cache_key("GET", "/perusahaan", None, 1) != objects.cache_key(
            "GET", "/perusahaan", None, 2
        )

    def test_to_json_handles_dataclasses(self, admin):
        assert '"email": "admin@example.com"' in objects.to_json(admin)
