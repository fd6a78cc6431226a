"""Sorting and grouping service for gallery directory content.

Media, sub-directories and media groups are ordered by a `SortingMethod`.
Unknown methods and missing lists are left untouched rather than rejected so
new enum members can be added without breaking older selectors.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import cmp_to_key
from typing import Any, TypeVar

from core.models import (
    DirectoryContent,
    DirectoryEntry,
    GroupedDirectoryContent,
    MediaGroup,
    MediaItem,
    SortingMethod,
)
from core.services.collation import natural_key
from core.services.seeded_random import SeededRandom

T = TypeVar("T")

DateFormatter = Callable[[float], str]

# (key function, descending)
_Order = tuple[Callable[[Any], Any], bool]


def _name(item: MediaItem | DirectoryEntry) -> Any:
    return natural_key(item.name)


def _creation_date(item: MediaItem) -> float:
    return item.creation_date


def _rating(item: MediaItem) -> int:
    return item.rating or 0


def _associate_count(item: MediaItem) -> int:
    return item.associate_count or 0


def _last_modified(item: DirectoryEntry) -> float:
    return item.last_modified


_MEDIA_ORDERS: dict[SortingMethod, _Order] = {
    SortingMethod.ASC_NAME: (_name, False),
    SortingMethod.DESC_NAME: (_name, True),
    SortingMethod.ASC_DATE: (_creation_date, False),
    SortingMethod.DESC_DATE: (_creation_date, True),
    SortingMethod.ASC_RATING: (_rating, False),
    SortingMethod.DESC_RATING: (_rating, True),
    SortingMethod.ASC_PERSON_COUNT: (_associate_count, False),
    SortingMethod.DESC_PERSON_COUNT: (_associate_count, True),
}

# Directories have no rating or faces; rating falls back to name
_DIRECTORY_ORDERS: dict[SortingMethod, _Order] = {
    SortingMethod.ASC_NAME: (_name, False),
    SortingMethod.DESC_NAME: (_name, True),
    SortingMethod.ASC_RATING: (_name, False),
    SortingMethod.DESC_RATING: (_name, True),
}

_DIRECTORY_DATE_ORDERS: dict[SortingMethod, _Order] = {
    SortingMethod.ASC_DATE: (_last_modified, False),
    SortingMethod.DESC_DATE: (_last_modified, True),
}

_DIRECTORY_DATE_AS_NAME: dict[SortingMethod, _Order] = {
    SortingMethod.ASC_DATE: (_name, False),
    SortingMethod.DESC_DATE: (_name, True),
}


class SortService:
    """Orders media and sub-directories and buckets media into groups.

    The service owns the `SeededRandom` used by `SortingMethod.RANDOM`, so one
    instance must not be shared between interleaving computations.
    """

    def __init__(
        self,
        date_formatter: DateFormatter,
        *,
        enable_directory_sorting_by_date: bool = False,
        rnd: SeededRandom | None = None,
    ) -> None:
        """Create a SortService.

        Args:
            date_formatter: Turns a creation timestamp into a long date label.
            enable_directory_sorting_by_date: Whether date methods order
                directories by `last_modified` (otherwise by name).
            rnd: Random source for the random method.
        """
        self._format_date = date_formatter
        self._rnd = rnd or SeededRandom()
        self._dir_orders = dict(_DIRECTORY_ORDERS)
        if enable_directory_sorting_by_date:
            self._dir_orders.update(_DIRECTORY_DATE_ORDERS)
        else:
            self._dir_orders.update(_DIRECTORY_DATE_AS_NAME)

    def sort_media(self, sorting: SortingMethod | None, media: list[MediaItem] | None) -> None:
        """Sort `media` in-place; no-op for None lists or unknown methods."""
        if media is None:
            return
        if sorting is SortingMethod.RANDOM:
            self._shuffle(media, descending_names=False)
            return
        order = _MEDIA_ORDERS.get(sorting)  # type: ignore[arg-type]
        if order is not None:
            key, reverse = order
            media.sort(key=key, reverse=reverse)

    def sort_directories(
        self, sorting: SortingMethod | None, directories: list[DirectoryEntry] | None
    ) -> None:
        """Sort `directories` in-place; no-op for None lists or unknown methods."""
        if directories is None:
            return
        if sorting is SortingMethod.RANDOM:
            # Directories are pre-sorted by descending name before shuffling,
            # media by ascending name. Kept as-is, see DESIGN.md.
            self._shuffle(directories, descending_names=True)
            return
        order = self._dir_orders.get(sorting)  # type: ignore[arg-type]
        if order is not None:
            key, reverse = order
            directories.sort(key=key, reverse=reverse)

    def group_key_for(self, grouping: SortingMethod | None) -> Callable[[MediaItem], str]:
        """Return the function deriving a group name from a media item."""
        if grouping in (SortingMethod.ASC_DATE, SortingMethod.DESC_DATE):
            return lambda m: self._format_date(m.creation_date)
        if grouping in (SortingMethod.ASC_NAME, SortingMethod.DESC_NAME):
            return lambda m: m.name[:1].lower()
        if grouping in (SortingMethod.ASC_RATING, SortingMethod.DESC_RATING):
            return lambda m: str(m.rating or 0)
        if grouping in (SortingMethod.ASC_PERSON_COUNT, SortingMethod.DESC_PERSON_COUNT):
            return lambda m: str(m.associate_count or 0)
        return lambda m: ""

    def group_media(
        self, grouping: SortingMethod | None, media: list[MediaItem] | None
    ) -> list[MediaGroup]:
        """Sort a copy of `media` by `grouping` and merge adjacent equal keys."""
        if media is None:
            return []
        ordered = list(media)
        self.sort_media(grouping, ordered)
        key_fn = self.group_key_for(grouping)

        groups: list[MediaGroup] = []
        for item in ordered:
            key = key_fn(item)
            if not groups or groups[-1].name != key:
                groups.append(MediaGroup(name=key))
            groups[-1].media.append(item)
        return groups

    def apply(
        self,
        content: DirectoryContent,
        sorting: SortingMethod | None,
        grouping: SortingMethod | None,
    ) -> GroupedDirectoryContent:
        """Build the sorted, grouped view of `content` without mutating it."""
        directories = list(content.directories or [])
        self.sort_directories(sorting, directories)

        groups = self.group_media(grouping, content.media)
        for group in groups:
            self.sort_media(sorting, group.media)

        return GroupedDirectoryContent(
            directories=directories,
            media_groups=groups,
            marker_files=list(content.marker_files or []),
        )

    def _shuffle(self, items: list[T], *, descending_names: bool) -> None:
        """Canonical name pre-sort, then a comparator-driven seeded shuffle.

        The seed is the list length, so equal-length lists get the same
        permutation. The result is not a uniform shuffle.
        """
        items.sort(key=lambda it: it.name.lower(), reverse=descending_names)  # type: ignore[attr-defined]
        self._rnd.set_seed(len(items))
        items.sort(key=cmp_to_key(lambda _a, _b: self._rnd.next() - 0.5))
