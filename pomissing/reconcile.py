"""
Merge completed translations from the missing catalog back into the main catalog,
then extract whatever is still untranslated into a fresh missing catalog.
"""

from dataclasses import dataclass, field
from typing import Optional

from .catalog import Catalog
from .entry import EntryKey
from .report import LocaleOutcome


@dataclass
class Reconciliation:
    main: Catalog
    missing: Optional[Catalog]
    merged: int = 0
    orphaned: "list[EntryKey]" = field(default_factory=list)

    @property
    def extracted(self):
        return len(self.missing) if self.missing else 0

    @property
    def outcome(self):
        if self.merged:
            return LocaleOutcome.MERGED
        if self.extracted:
            return LocaleOutcome.EXTRACTED
        return LocaleOutcome.CLEAN


def merge_translations(main: Catalog, missing: Catalog):
    """
    Copy every completed translation of the missing catalog into the main catalog.

    A completion always wins over the value already in the main catalog.
    Returns the number of merged entries and the keys of the completions
    whose entry no longer exists in the main catalog, or exists with a
    different plural form.
    """
    main_entries = main.entries_by_key()
    merged = 0
    orphaned: list[EntryKey] = []
    for entry in missing.active_entries():
        if not entry.is_translated():
            continue
        main_entry = main_entries.get(entry.key)
        # a singular translation can not fill plural forms, nor the other way round
        if main_entry is None or main_entry.is_plural() != entry.is_plural():
            orphaned.append(entry.key)
            continue
        main_entry.copy_translation(entry)
        merged += 1
    return merged, orphaned


def extract_missing(main: Catalog):
    untranslated = list(main.untranslated_entries())
    if not untranslated:
        return None
    return main.derive(untranslated)


def reconcile(main: Catalog, missing: Optional[Catalog] = None):
    merged = 0
    orphaned: list[EntryKey] = []
    if missing is not None:
        merged, orphaned = merge_translations(main, missing)

    return Reconciliation(
        main=main, missing=extract_missing(main), merged=merged, orphaned=orphaned
    )
