"""Per-directory sorting override storage.

Only deviations from a directory's default are stored; a missing entry means
"use the default".
"""

from __future__ import annotations

import json
from pathlib import Path

from loguru import logger

from core.models import SortingMethod
from core.services.interfaces import ISortingCache
from infrastructure.utils import parse_sorting_method


class MemorySortingCache(ISortingCache):
    """Process-local override cache."""

    def __init__(self) -> None:
        self._data: dict[str, SortingMethod] = {}

    def get_sorting(self, key: str) -> SortingMethod | None:
        return self._data.get(key)

    def set_sorting(self, key: str, sorting: SortingMethod) -> None:
        self._data[key] = sorting

    def remove_sorting(self, key: str) -> None:
        self._data.pop(key, None)

    def __len__(self) -> int:
        return len(self._data)


class JsonSortingCache(MemorySortingCache):
    """Override cache persisted to a JSON object file {key: method}.

    A missing or unreadable file starts the cache empty. Write failures are
    logged and leave the in-memory state intact.
    """

    def __init__(self, path: str | Path) -> None:
        super().__init__()
        self._path = Path(path)
        self._load()

    def set_sorting(self, key: str, sorting: SortingMethod) -> None:
        super().set_sorting(key, sorting)
        self._save()

    def remove_sorting(self, key: str) -> None:
        if key not in self._data:
            return
        super().remove_sorting(key)
        self._save()

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            with self._path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as ex:
            logger.warning("Sorting cache {} unreadable, starting empty: {}", self._path, ex)
            return
        if not isinstance(raw, dict):
            logger.warning("Sorting cache {} is not an object, starting empty", self._path)
            return
        for key, value in raw.items():
            sorting = parse_sorting_method(value)
            if sorting is None:
                logger.warning("Dropping unknown sorting {!r} for {}", value, key)
                continue
            self._data[str(key)] = sorting

    def _save(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8") as f:
                json.dump({k: v.value for k, v in self._data.items()}, f, indent=2)
        except OSError as ex:
            logger.error("Failed to write sorting cache {}: {}", self._path, ex)
