"""
Shared fixtures for gallery sorting tests.
Builds small media/directory listings with controlled names, dates and ratings.
"""
from __future__ import annotations

import pytest
from PySide6.QtCore import QCoreApplication

from core.models import DirectoryContent, DirectoryEntry, MarkerFile, MediaItem
from core.services.sort_service import SortService

DAY_MS = 24 * 60 * 60 * 1000


def day_label(timestamp_ms: float) -> str:
    """Deterministic stand-in for the locale date formatter."""
    return f"day-{int(timestamp_ms // DAY_MS)}"


def media(name: str, day: int = 0, rating: int | None = None, faces: int | None = None) -> MediaItem:
    return MediaItem(name=name, creation_date=day * DAY_MS + 1000, rating=rating, associate_count=faces)


def directory(name: str, last_modified: float = 0) -> DirectoryEntry:
    return DirectoryEntry(name=name, last_modified=last_modified)


def names(items) -> list[str]:
    return [it.name for it in items]


@pytest.fixture(scope="session", autouse=True)
def qcore_app():
    """Single QCoreApplication for signal-based view-models."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def sorter() -> SortService:
    return SortService(day_label)


@pytest.fixture
def date_sorter() -> SortService:
    """SortService with directory ordering by modification date enabled."""
    return SortService(day_label, enable_directory_sorting_by_date=True)


@pytest.fixture
def holiday_content() -> DirectoryContent:
    """
    Directory with:
    - 3 sub-directories (names and modification times disagree on order)
    - 5 media spread over 2 days, with mixed ratings and face counts
    - 1 unrelated marker file
    """
    return DirectoryContent(
        key="/2021/holiday",
        directories=[
            directory("day10", last_modified=100),
            directory("day2", last_modified=300),
            directory("Day1", last_modified=200),
        ],
        media=[
            media("img10.jpg", day=1, rating=5, faces=2),
            media("img2.jpg", day=0, rating=None, faces=None),
            media("beach.jpg", day=1, rating=3, faces=1),
            media("img1.jpg", day=0, rating=5, faces=4),
            media("Apple.jpg", day=1, rating=1, faces=None),
        ],
        marker_files=[MarkerFile(name="notes.txt")],
    )
