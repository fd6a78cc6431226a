"""Core service interfaces and shared configuration structures.

The sorting core consumes a per-directory override cache and gallery
configuration; concrete implementations live in `infrastructure`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from core.models import SortingMethod

DEFAULT_MARKER_FILE_SORTING: dict[str, SortingMethod] = {
    ".order_descending_name.pg2conf": SortingMethod.DESC_NAME,
    ".order_ascending_name.pg2conf": SortingMethod.ASC_NAME,
    ".order_descending_date.pg2conf": SortingMethod.DESC_DATE,
    ".order_ascending_date.pg2conf": SortingMethod.ASC_DATE,
    ".order_descending_rating.pg2conf": SortingMethod.DESC_RATING,
    ".order_ascending_rating.pg2conf": SortingMethod.ASC_RATING,
    ".order_descending_person_count.pg2conf": SortingMethod.DESC_PERSON_COUNT,
    ".order_ascending_person_count.pg2conf": SortingMethod.ASC_PERSON_COUNT,
    ".order_random.pg2conf": SortingMethod.RANDOM,
}


@dataclass
class GalleryConfig:
    """Gallery sorting configuration.

    Attributes:
        default_photo_sorting: Default method when browsing directories.
        default_search_sorting: Default method for search results.
        default_grouping: Initial grouping method.
        enable_directory_sorting_by_date: Order directories by modification
            time for date methods (otherwise by name).
        marker_file_sorting: Marker file name -> method; first matching entry
            in this order wins.
    """

    default_photo_sorting: SortingMethod = SortingMethod.ASC_DATE
    default_search_sorting: SortingMethod = SortingMethod.DESC_DATE
    default_grouping: SortingMethod = SortingMethod.ASC_DATE
    enable_directory_sorting_by_date: bool = False
    marker_file_sorting: dict[str, SortingMethod] = field(
        default_factory=lambda: dict(DEFAULT_MARKER_FILE_SORTING)
    )


class ISortingCache:
    """Interface for persisting per-directory sorting overrides."""

    def get_sorting(self, key: str) -> SortingMethod | None:
        """Return the stored override for directory `key`, if any."""
        raise NotImplementedError

    def set_sorting(self, key: str, sorting: SortingMethod) -> None:
        """Store `sorting` as the override for directory `key`."""
        raise NotImplementedError

    def remove_sorting(self, key: str) -> None:
        """Forget the override for directory `key`."""
        raise NotImplementedError
