from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class LocaleOutcome(Enum):
    CLEAN = "Clean"
    MERGED = "Merged"
    EXTRACTED = "Extracted"
    ERROR = "Error"


class LocaleErrorKind(Enum):
    IO = "I/O error"
    MALFORMED = "Malformed entry"


@dataclass(frozen=True)
class LocaleError:
    kind: LocaleErrorKind
    message: str
    path: Optional[Path] = None

    def __str__(self):
        if self.path:
            return f"{self.kind.value}: {self.path}: {self.message}"
        return f"{self.kind.value}: {self.message}"


@dataclass
class LocaleReport:
    locale: str
    outcome: LocaleOutcome
    merged: int = 0
    orphaned: int = 0
    extracted: int = 0
    errors: "list[LocaleError]" = field(default_factory=list)

    @property
    def count(self):
        """The number the outcome is about"""
        if self.outcome is LocaleOutcome.MERGED:
            return self.merged
        if self.outcome is LocaleOutcome.EXTRACTED:
            return self.extracted
        return 0

    @classmethod
    def failed(cls, locale: str, error: LocaleError):
        return cls(locale=locale, outcome=LocaleOutcome.ERROR, errors=[error])


@dataclass
class RunSummary:
    reports: "list[LocaleReport]" = field(default_factory=list)

    @property
    def processed(self):
        return len(self.reports)

    @property
    def errors(self):
        return sum(len(report.errors) for report in self.reports)

    def count(self, outcome: LocaleOutcome):
        return sum(1 for report in self.reports if report.outcome is outcome)
