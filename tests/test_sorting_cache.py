"""
Unit tests for infrastructure/sorting_cache.py
"""
import json

from core.models import SortingMethod
from infrastructure.sorting_cache import JsonSortingCache, MemorySortingCache


class TestMemorySortingCache:
    def test_set_get_remove(self):
        cache = MemorySortingCache()
        assert cache.get_sorting("/a") is None
        cache.set_sorting("/a", SortingMethod.DESC_NAME)
        assert cache.get_sorting("/a") is SortingMethod.DESC_NAME
        cache.remove_sorting("/a")
        assert cache.get_sorting("/a") is None
        assert len(cache) == 0

    def test_remove_missing_key_is_noop(self):
        MemorySortingCache().remove_sorting("/missing")


class TestJsonSortingCache:
    def test_survives_reload(self, tmp_path):
        path = tmp_path / "cache.json"
        cache = JsonSortingCache(path)
        cache.set_sorting("/2021", SortingMethod.RANDOM)
        cache.set_sorting("/2022", SortingMethod.ASC_NAME)
        cache.remove_sorting("/2022")

        reloaded = JsonSortingCache(path)
        assert reloaded.get_sorting("/2021") is SortingMethod.RANDOM
        assert reloaded.get_sorting("/2022") is None
        assert json.loads(path.read_text(encoding="utf-8")) == {"/2021": "random"}

    def test_missing_file_starts_empty(self, tmp_path):
        cache = JsonSortingCache(tmp_path / "sub" / "cache.json")
        assert len(cache) == 0
        cache.set_sorting("/x", SortingMethod.DESC_DATE)
        assert (tmp_path / "sub" / "cache.json").exists()

    def test_corrupt_file_starts_empty(self, tmp_path):
        path = tmp_path / "cache.json"
        path.write_text("{not json", encoding="utf-8")
        assert len(JsonSortingCache(path)) == 0

    def test_unknown_methods_dropped(self, tmp_path):
        path = tmp_path / "cache.json"
        path.write_text(json.dumps({"/a": "descRating", "/b": "bySize"}), encoding="utf-8")
        cache = JsonSortingCache(path)
        assert cache.get_sorting("/a") is SortingMethod.DESC_RATING
        assert cache.get_sorting("/b") is None
