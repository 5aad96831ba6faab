from copy import deepcopy
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from polib import POFile, escape, pofile

from .constants import DEFAULT_WRAP_WIDTH
from .entry import CatalogEntry, EntryKey
from .errors import DuplicateEntry, MalformedEntry


@dataclass
class Header:
    """The catalog metadata entry (msgid "") and the comment block above it"""

    comment: str = ""
    metadata: "dict[str, str]" = field(default_factory=dict)
    flags: "list[str]" = field(default_factory=list)
    # False for catalogs read from text without a msgid "" entry
    present: bool = True

    @classmethod
    def from_pofile(cls, po: POFile):
        flags = po.metadata_is_fuzzy
        if not isinstance(flags, list):
            flags = ["fuzzy"] if flags else []
        return cls(comment=po.header, metadata=dict(po.metadata), flags=list(flags))

    def copy(self):
        return Header(
            comment=self.comment,
            metadata=dict(self.metadata),
            flags=list(self.flags),
            present=self.present,
        )

    def render(self):
        """
        Render the header the way polib does, keeping the metadata in file order
        """
        lines: list[str] = []
        if self.comment:
            for line in self.comment.split("\n"):
                if not line:
                    lines.append("#")
                elif line[:1] in (",", ":"):
                    lines.append(f"#{line}")
                else:
                    lines.append(f"# {line}")
        if self.flags:
            lines.append(f"#, {', '.join(self.flags)}")

        lines.append('msgid ""')
        lines.append('msgstr ""')
        metadata = "".join(f"{key}: {value}\n" for key, value in self.metadata.items())
        lines.extend(f'"{escape(line)}"' for line in metadata.splitlines(True))
        lines.append("")
        return "\n".join(lines)


class Catalog:
    def __init__(
        self,
        header: Optional[Header] = None,
        entries: Iterable[CatalogEntry] = (),
        wrapwidth: int = DEFAULT_WRAP_WIDTH,
    ):
        self.header = header or Header()
        self.entries = list(entries)
        self.wrapwidth = wrapwidth

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    def __eq__(self, other: object):
        if not isinstance(other, Catalog):
            return NotImplemented
        return self.header == other.header and self.entries == other.entries

    def __str__(self):
        return serialize_catalog(self)

    def active_entries(self):
        for entry in self.entries:
            if not entry.obsolete:
                yield entry

    def entries_by_key(self) -> "dict[EntryKey, CatalogEntry]":
        return {entry.key: entry for entry in self.active_entries()}

    def untranslated_entries(self):
        for entry in self.active_entries():
            if not entry.is_translated():
                yield entry

    def derive(self, entries: Iterable[CatalogEntry]):
        """
        Create a new catalog with the same header holding copies of the given entries
        """
        return Catalog(
            header=self.header.copy(),
            entries=[CatalogEntry(deepcopy(entry.entry)) for entry in entries],
            wrapwidth=self.wrapwidth,
        )


def check_entry_keys(entries: Iterable[CatalogEntry]):
    """
    Reject entries which can not be told apart by (msgctxt, msgid)
    """
    seen_keys: set[EntryKey] = set()
    for entry in entries:
        if entry.obsolete:
            continue
        if not entry.msgid and entry.msgctxt is None:
            raise MalformedEntry("Entry with empty msgid outside of the header")
        if entry.key in seen_keys:
            raise DuplicateEntry(entry.key)
        seen_keys.add(entry.key)


def starts_with_header(text: str):
    """
    Tell whether the first entry of PO text is the msgid "" metadata entry
    """
    lines = [line.strip() for line in text.lstrip("\ufeff").splitlines()]
    lines = [line for line in lines if line and not line.startswith("#")]
    if not lines or lines[0] != 'msgid ""':
        return False
    # msgid "" followed by a string is a regular multi-line msgid
    return len(lines) == 1 or not lines[1].startswith('"')


def parse_catalog(text: str, wrapwidth: int = DEFAULT_WRAP_WIDTH):
    if not text.strip():
        return Catalog(header=Header(present=False), wrapwidth=wrapwidth)

    try:
        po = pofile(text, wrapwidth=wrapwidth, encoding="utf-8")
    except OSError as error:
        # polib reports every syntax error as an IOError
        raise MalformedEntry(str(error)) from error

    entries = [CatalogEntry(entry) for entry in po]
    check_entry_keys(entries)

    header = Header.from_pofile(po)
    if not starts_with_header(text):
        # polib files the comments above the first entry as the file header
        if header.comment and entries:
            first = entries[0].entry
            first.tcomment = "\n".join(filter(None, [header.comment, first.tcomment]))
        header.comment = ""
        header.present = bool(header.metadata or header.flags)
    return Catalog(header=header, entries=entries, wrapwidth=wrapwidth)


def serialize_catalog(catalog: Catalog):
    blocks: list[str] = []
    if catalog.header.present:
        blocks.append(catalog.header.render())
    # obsolete entries go last, as polib writes them
    entries = list(catalog.active_entries()) + [
        entry for entry in catalog if entry.obsolete
    ]
    blocks.extend(entry.entry.__unicode__(catalog.wrapwidth) for entry in entries)
    return "\n".join(blocks)
