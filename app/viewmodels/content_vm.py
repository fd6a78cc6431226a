"""ViewModel holding the directory content currently being browsed."""

from __future__ import annotations

from PySide6.QtCore import QObject, Signal

from core.models import DirectoryContent


class ContentVM(QObject):
    """Current `DirectoryContent` snapshot, None while nothing is loaded.

    `contentChanged` fires on every `set_content`, including repeats of the
    same snapshot.
    """

    contentChanged = Signal(object)  # DirectoryContent | None

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._content: DirectoryContent | None = None

    @property
    def content(self) -> DirectoryContent | None:
        return self._content

    def set_content(self, content: DirectoryContent | None) -> None:
        self._content = content
        self.contentChanged.emit(content)
