"""JSON persistence for directory listings and their grouped view.

A listing file looks like::

    {"key": "/2021/holiday", "searchResult": false,
     "directories": [{"name": "day1", "lastModified": 1614769200000}],
     "media": [{"name": "img1.jpg", "creationDate": 1614769200000,
                "rating": 4, "faces": 2}],
     "markerFiles": [{"name": ".order_random.pg2conf"}]}

Timestamps are epoch milliseconds. `faces` may be a count or a list.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger

from core.models import (
    DirectoryContent,
    DirectoryEntry,
    GroupedDirectoryContent,
    MarkerFile,
    MediaItem,
)


def _optional_int(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, list):
        return len(value)
    return int(value)


def _parse_media(row: dict[str, Any]) -> MediaItem:
    return MediaItem(
        name=str(row["name"]),
        creation_date=float(row.get("creationDate", 0) or 0),
        rating=_optional_int(row.get("rating")),
        associate_count=_optional_int(row.get("faces", row.get("associateCount"))),
        path=str(row.get("path", "") or ""),
    )


def _parse_directory(row: dict[str, Any]) -> DirectoryEntry:
    return DirectoryEntry(
        name=str(row["name"]),
        last_modified=float(row.get("lastModified", 0) or 0),
        path=str(row.get("path", "") or ""),
    )


class JsonContentRepository:
    """Load directory listings and save grouped views as JSON."""

    def load(self, json_path: str | Path) -> DirectoryContent:
        """Read a `DirectoryContent` from `json_path`.

        Rows that cannot be parsed are logged and skipped.
        """
        path = Path(json_path)
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
        if not isinstance(raw, dict):
            raise ValueError(f"Listing must be a JSON object: {path}")

        media: list[MediaItem] = []
        for row in raw.get("media", []) or []:
            try:
                media.append(_parse_media(row))
            except (ValueError, TypeError, KeyError) as ex:
                logger.error("Media row error: {} | row={}", ex, row)

        directories: list[DirectoryEntry] = []
        for row in raw.get("directories", []) or []:
            try:
                directories.append(_parse_directory(row))
            except (ValueError, TypeError, KeyError) as ex:
                logger.error("Directory row error: {} | row={}", ex, row)

        marker_files = [
            MarkerFile(name=str(row["name"]), path=str(row.get("path", "") or ""))
            for row in raw.get("markerFiles", []) or []
            if isinstance(row, dict) and "name" in row
        ]

        return DirectoryContent(
            key=str(raw.get("key") or path.stem),
            directories=directories,
            media=media,
            marker_files=marker_files,
            is_search_result=bool(raw.get("searchResult", False)),
        )

    def save(self, json_path: str | Path, grouped: GroupedDirectoryContent) -> None:
        """Write `grouped` to `json_path` in display order."""
        path = Path(json_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(to_json_dict(grouped), f, indent=2)


def to_json_dict(grouped: GroupedDirectoryContent) -> dict[str, Any]:
    """Plain-dict form of a grouped view, keeping display order."""
    return {
        "directories": [d.name for d in grouped.directories],
        "mediaGroups": [
            {"name": g.name, "media": [m.name for m in g.media]} for g in grouped.media_groups
        ],
        "markerFiles": [m.name for m in grouped.marker_files],
    }
