from .catalog import Catalog, Header, parse_catalog, serialize_catalog
from .constants import MESSAGES_FILE_NAME, MISSING_FILE_NAME, VERSION
from .entry import CatalogEntry, EntryKey
from .errors import DuplicateEntry, MalformedEntry, MissingBasePath, POMissingError
from .pomissing import POMissing, main
from .reconcile import Reconciliation, reconcile
from .report import (
    LocaleError,
    LocaleErrorKind,
    LocaleOutcome,
    LocaleReport,
    RunSummary,
)

__version__ = VERSION
