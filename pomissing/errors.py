from pathlib import Path
from typing import Optional

from .entry import EntryKey


class POMissingError(Exception):
    pass


class MalformedEntry(POMissingError):
    """
    Raised when PO text can not be turned into a catalog
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self):
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class DuplicateEntry(MalformedEntry):
    def __init__(self, key: EntryKey, path: Optional[Path] = None):
        msgctxt, msgid = key
        message = f"Duplicate entry with msgid {repr(msgid)}"
        if msgctxt is not None:
            message += f" and msgctxt {repr(msgctxt)}"
        super().__init__(message, path)
        self.key = key


class MissingBasePath(POMissingError):
    def __init__(self, base_path: Path, reason: str = "does not exist"):
        super().__init__(f"Directory '{base_path}' {reason}")
        self.base_path = base_path
