"""Resolution of the default sorting method for a directory snapshot."""

from __future__ import annotations

from core.models import DirectoryContent, SortingMethod
from core.services.interfaces import GalleryConfig


class DefaultSortingResolver:
    """Picks a directory's default sorting from marker files or configuration."""

    def __init__(self, config: GalleryConfig) -> None:
        self._config = config

    def resolve(self, content: DirectoryContent) -> SortingMethod:
        """Return the default sorting for `content`.

        Marker files are checked against the configured mapping in the
        mapping's order; the first mapped name present wins. Without a match,
        search results use the search default and directories the photo
        default.
        """
        if content.marker_files:
            present = {f.name for f in content.marker_files}
            for file_name, sorting in self._config.marker_file_sorting.items():
                if file_name in present:
                    return sorting
        if content.is_search_result:
            return self._config.default_search_sorting
        return self._config.default_photo_sorting
