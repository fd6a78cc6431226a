"""Locale-aware, numeric-aware ("natural") string collation.

`img2` sorts before `img10`: digit runs compare by value, letters follow the
locale's collation rules. Strings the collator considers equal (e.g. `img01`
and `img1`) fall back to a plain string comparison so the order stays total.
"""

from __future__ import annotations

from functools import cmp_to_key

from PySide6.QtCore import QCollator, QLocale

_collator: QCollator | None = None


def _collation_locale() -> QLocale:
    locale = QLocale()
    # The C locale collates by code point; use a real language instead
    if locale.language() in (QLocale.Language.C, QLocale.Language.AnyLanguage):
        return QLocale("en_US")
    return locale


def _get_collator() -> QCollator:
    global _collator  # pylint: disable=global-statement
    if _collator is None:
        _collator = QCollator(_collation_locale())
        _collator.setNumericMode(True)
    return _collator


def compare(a: str, b: str) -> int:
    """Compare two strings naturally; negative, zero or positive."""
    result = _get_collator().compare(a, b)
    if result:
        return result
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


# Sort key implementing `compare` order
natural_key = cmp_to_key(compare)
