"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger

from core.models import SortingMethod
from core.services.interfaces import GalleryConfig
from infrastructure.utils import parse_sorting_method


class JsonSettings:
    """Lightweight JSON settings reader with dotted-key access."""

    def __init__(self, settings_path: str | Path) -> None:
        self._path = Path(settings_path)
        if not self._path.exists():
            raise FileNotFoundError(f"settings.json not found: {self._path}")
        with self._path.open("r", encoding="utf-8") as f:
            self._data = json.load(f)

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node


def _method(settings: JsonSettings, key: str, default: SortingMethod) -> SortingMethod:
    raw = settings.get(key)
    if raw is None:
        return default
    parsed = parse_sorting_method(raw)
    if parsed is None:
        logger.warning("Unknown sorting method {!r} for {}, using {}", raw, key, default.value)
        return default
    return parsed


def _marker_mapping(settings: JsonSettings, key: str) -> dict[str, SortingMethod] | None:
    # Expect an object like: {".order_random.pg2conf": "random", ...}
    raw = settings.get(key)
    if raw is None:
        return None
    if not isinstance(raw, dict):
        logger.warning("Ignoring {}: expected an object, got {}", key, type(raw).__name__)
        return None
    result: dict[str, SortingMethod] = {}
    for file_name, value in raw.items():
        parsed = parse_sorting_method(value)
        if parsed is None:
            logger.warning("Unknown sorting method {!r} for marker file {}", value, file_name)
            continue
        result[str(file_name)] = parsed
    return result


def load_gallery_config(settings: JsonSettings | None) -> GalleryConfig:
    """Build a `GalleryConfig` from the `gallery.*` keys of `settings`."""
    config = GalleryConfig()
    if settings is None:
        return config

    config.default_photo_sorting = _method(
        settings, "gallery.defaultPhotoSortingMethod", config.default_photo_sorting
    )
    config.default_search_sorting = _method(
        settings, "gallery.defaultSearchSortingMethod", config.default_search_sorting
    )
    config.default_grouping = _method(
        settings, "gallery.defaultPhotoGroupingMethod", config.default_grouping
    )
    config.enable_directory_sorting_by_date = bool(
        settings.get("gallery.enableDirectorySortingByDate", False)
    )
    mapping = _marker_mapping(settings, "gallery.markerFileSorting")
    if mapping is not None:
        config.marker_file_sorting = mapping
    return config
