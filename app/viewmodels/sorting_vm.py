"""ViewModel for gallery sorting and grouping.

Holds the current sorting and grouping selections, remembers per-directory
sorting overrides, and derives the grouped view of the browsed content. All
recomputation happens synchronously inside the emitting signal.
"""

from __future__ import annotations

from PySide6.QtCore import QObject, Signal
from loguru import logger

from app.viewmodels.content_vm import ContentVM
from core.models import DirectoryContent, GroupedDirectoryContent, SortingMethod
from core.services.default_sorting import DefaultSortingResolver
from core.services.interfaces import GalleryConfig, ISortingCache
from core.services.sort_service import SortService
from infrastructure.utils import format_long_date


class SortedContent(QObject):
    """Grouped view of a content source, kept current with the selections.

    `value` is None while the source holds no content. `changed` fires after
    every recomputation.
    """

    changed = Signal(object)  # GroupedDirectoryContent | None

    def __init__(
        self,
        source: ContentVM,
        sorting_vm: GallerySortingVM,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._source = source
        self._sorting_vm = sorting_vm
        self._value = self._compute()
        source.contentChanged.connect(self._on_input_changed)
        sorting_vm.sortingChanged.connect(self._on_input_changed)
        sorting_vm.groupingChanged.connect(self._on_input_changed)

    @property
    def value(self) -> GroupedDirectoryContent | None:
        return self._value

    def _on_input_changed(self, _changed: object) -> None:
        self._value = self._compute()
        self.changed.emit(self._value)

    def _compute(self) -> GroupedDirectoryContent | None:
        content = self._source.content
        if content is None:
            return None
        result = self._sorting_vm.sorter.apply(
            content, self._sorting_vm.sorting, self._sorting_vm.grouping
        )
        logger.debug(
            "Sorted {}: {} directories, {} media groups",
            content.key,
            len(result.directories),
            len(result.media_groups),
        )
        return result


class GallerySortingVM(QObject):
    """Sorting/grouping state for the gallery.

    The sorting is re-initialized for each new content snapshot from the
    stored override, or from the directory's default when there is none.
    Grouping is never remembered per directory.
    """

    sortingChanged = Signal(object)  # SortingMethod
    groupingChanged = Signal(object)  # SortingMethod

    def __init__(
        self,
        content_vm: ContentVM,
        cache: ISortingCache,
        config: GalleryConfig | None = None,
        sorter: SortService | None = None,
        parent: QObject | None = None,
    ) -> None:
        """Create a GallerySortingVM.

        Args:
            content_vm: Source of the currently browsed content.
            cache: Per-directory override storage.
            config: Gallery configuration (defaults to `GalleryConfig()`).
            sorter: Sorting service; one is built from `config` when omitted.
            parent: Qt parent object.
        """
        super().__init__(parent)
        self._config = config or GalleryConfig()
        self._content_vm = content_vm
        self._cache = cache
        self._resolver = DefaultSortingResolver(self._config)
        self.sorter = sorter or SortService(
            format_long_date,
            enable_directory_sorting_by_date=self._config.enable_directory_sorting_by_date,
        )
        self._sorting = self._config.default_photo_sorting
        self._grouping = self._config.default_grouping

        content_vm.contentChanged.connect(self._on_content_changed)
        if content_vm.content is not None:
            self._on_content_changed(content_vm.content)

    @property
    def sorting(self) -> SortingMethod:
        return self._sorting

    @property
    def grouping(self) -> SortingMethod:
        return self._grouping

    def get_default_sorting(self, content: DirectoryContent) -> SortingMethod:
        """Default sorting for `content`, ignoring any stored override."""
        return self._resolver.resolve(content)

    def set_sorting(self, sorting: SortingMethod) -> None:
        """Select `sorting` and remember it for the current directory.

        The override is stored only when it differs from the directory's
        default; otherwise any stored override is removed.
        """
        self._sorting = sorting
        self.sortingChanged.emit(sorting)
        content = self._content_vm.content
        if content is None:
            return
        if sorting != self.get_default_sorting(content):
            logger.debug("Storing sorting override {} for {}", sorting.value, content.key)
            self._cache.set_sorting(content.key, sorting)
        else:
            logger.debug("Removing sorting override for {}", content.key)
            self._cache.remove_sorting(content.key)

    def set_grouping(self, grouping: SortingMethod) -> None:
        self._grouping = grouping
        self.groupingChanged.emit(grouping)

    def apply_sorting(self, content_vm: ContentVM | None = None) -> SortedContent:
        """Return the grouped view of `content_vm` (this VM's source by default)."""
        return SortedContent(content_vm or self._content_vm, self, parent=self)

    def _on_content_changed(self, content: DirectoryContent | None) -> None:
        if content is None:
            # Nothing to resolve against; keep the current selection
            return
        sorting = self._cache.get_sorting(content.key)
        if sorting is not None:
            logger.debug("Using stored sorting {} for {}", sorting.value, content.key)
        else:
            sorting = self.get_default_sorting(content)
            logger.debug("Using default sorting {} for {}", sorting.value, content.key)
        self._sorting = sorting
        self.sortingChanged.emit(sorting)
