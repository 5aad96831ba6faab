from typing import Optional, Tuple

from polib import POEntry

EntryKey = Tuple[Optional[str], str]


def is_blank(value: Optional[str]):
    return not value or not value.strip()


class CatalogEntry:
    def __init__(self, entry: POEntry):
        self.entry = entry

    @property
    def msgid(self) -> str:
        return self.entry.msgid

    @property
    def msgctxt(self) -> Optional[str]:
        return self.entry.msgctxt

    @property
    def msgstr(self) -> str:
        return self.entry.msgstr

    @msgstr.setter
    def msgstr(self, value: str):
        self.entry.msgstr = value

    @property
    def msgstr_plural(self) -> "dict[int, str]":
        return self.entry.msgstr_plural

    @property
    def obsolete(self) -> bool:
        return bool(self.entry.obsolete)

    @property
    def key(self) -> EntryKey:
        return self.msgctxt, self.msgid

    @property
    def comments(self) -> "list[str]":
        """
        Comment lines preceding the entry, as they are written to the file
        """
        comments: list[str] = []
        for line in str(self.entry).splitlines():
            if not line.startswith("#") or line.startswith("#~"):
                break
            comments.append(line)
        return comments

    def is_plural(self):
        return bool(self.entry.msgid_plural)

    def is_translated(self):
        if self.is_plural():
            forms = self.msgstr_plural.values()
            return bool(forms) and not any(is_blank(msgstr) for msgstr in forms)
        return not is_blank(self.msgstr)

    def copy_translation(self, other: "CatalogEntry"):
        """
        Overwrite this entry's translation with the one of another entry
        """
        if other.is_plural():
            self.entry.msgstr_plural = dict(other.msgstr_plural)
        else:
            self.msgstr = other.msgstr

    def __key(self):
        return (
            self.key,
            self.entry.msgid_plural,
            self.msgstr,
            tuple(sorted(self.msgstr_plural.items())),
            self.obsolete,
            tuple(self.comments),
        )

    def __eq__(self, other: object):
        if not isinstance(other, CatalogEntry):
            return NotImplemented
        return self.__key() == other.__key()

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return f"CatalogEntry({repr(self.msgid)}, {repr(self.msgstr)})"
