"""Core domain models for gallery directory content and its sorted view."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SortingMethod(Enum):
    """Ordering strategy used for sorting and, separately, for grouping."""

    ASC_NAME = "ascName"
    DESC_NAME = "descName"
    ASC_DATE = "ascDate"
    DESC_DATE = "descDate"
    ASC_RATING = "ascRating"
    DESC_RATING = "descRating"
    ASC_PERSON_COUNT = "ascPersonCount"
    DESC_PERSON_COUNT = "descPersonCount"
    RANDOM = "random"


@dataclass
class MediaItem:
    """A photo or video inside a directory."""

    name: str
    creation_date: float  # epoch milliseconds
    rating: int | None = None
    # Number of recognised faces, if known
    associate_count: int | None = None
    path: str = ""


@dataclass
class DirectoryEntry:
    """A sub-directory listed inside a directory."""

    name: str
    last_modified: float  # epoch milliseconds
    path: str = ""


@dataclass
class MarkerFile:
    """A metadata file found in a directory (e.g. `.order_random.pg2conf`)."""

    name: str
    path: str = ""


@dataclass
class DirectoryContent:
    """Unsorted snapshot of one directory or one search result.

    Attributes:
        key: Identity used for per-directory override lookups.
        is_search_result: True when the snapshot comes from a search.
    """

    key: str
    directories: list[DirectoryEntry] | None = field(default_factory=list)
    media: list[MediaItem] | None = field(default_factory=list)
    marker_files: list[MarkerFile] | None = field(default_factory=list)
    is_search_result: bool = False


@dataclass
class MediaGroup:
    """A named bucket of media sharing one grouping key."""

    name: str
    media: list[MediaItem] = field(default_factory=list)


@dataclass
class GroupedDirectoryContent:
    """Sorted and grouped view of a `DirectoryContent`."""

    directories: list[DirectoryEntry] = field(default_factory=list)
    media_groups: list[MediaGroup] = field(default_factory=list)
    marker_files: list[MarkerFile] = field(default_factory=list)
