"""
Extract missing translations from PO files into messages-missing.po files
and merge them back once they are translated.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from tabulate import tabulate

from .catalog import Catalog, parse_catalog
from .constants import (
    DEFAULT_BASE_PATH,
    DEFAULT_WRAP_WIDTH,
    DONE_ICON,
    ERROR_ICON,
    MERGED_ICON,
    MESSAGES_FILE_NAME,
    MISSING_FILE_NAME,
    VERSION,
)
from .errors import MalformedEntry, MissingBasePath
from .helpers import list_subdirectories, read_text, remove_file, write_text
from .reconcile import Reconciliation, reconcile
from .report import (
    LocaleError,
    LocaleErrorKind,
    LocaleOutcome,
    LocaleReport,
    RunSummary,
)


class POMissing:
    def __init__(
        self,
        base_path: Path = Path(DEFAULT_BASE_PATH),
        verbose: bool = False,
        wrap_width: int = DEFAULT_WRAP_WIDTH,
    ):
        self.base_path = Path(base_path)
        self.verbose = verbose
        self.wrap_width = wrap_width

    def start(self):
        if self.verbose:
            print(f"Scanning for locales in '{self.base_path}' directory...")

        summary = self._run()
        self.describe_results(summary)
        return summary

    def _run(self):
        summary = RunSummary()
        for locale_path in self.find_locale_paths():
            report = self.process_locale(locale_path)
            if report is None:
                continue
            summary.reports.append(report)
            self.describe_locale(report)
        return summary

    def find_locale_paths(self):
        if not self.base_path.exists():
            raise MissingBasePath(self.base_path)
        if not self.base_path.is_dir():
            raise MissingBasePath(self.base_path, "is not a directory")
        try:
            return list_subdirectories(self.base_path)
        except OSError as error:
            raise MissingBasePath(
                self.base_path, f"can not be read ({error.strerror})"
            ) from error

    def load_catalog(self, path: Path) -> Optional[Catalog]:
        try:
            text = read_text(path)
            if text is None:
                return None
            return parse_catalog(text, wrapwidth=self.wrap_width)
        except UnicodeDecodeError as error:
            message = f"Not a UTF-8 file ({error.reason})"
            raise MalformedEntry(message, path) from error
        except MalformedEntry as error:
            error.path = path
            raise

    def process_locale(self, locale_path: Path) -> Optional[LocaleReport]:
        """
        Run one merge and extract pass over a locale directory.

        Returns None for directories without a messages.po file; problems with
        the locale's files are reported instead of raised.
        """
        locale = locale_path.name
        messages_path = locale_path / MESSAGES_FILE_NAME
        missing_path = locale_path / MISSING_FILE_NAME

        try:
            main_catalog = self.load_catalog(messages_path)
            if main_catalog is None:
                return None
            missing_catalog = self.load_catalog(missing_path)
            reconciliation = reconcile(main_catalog, missing_catalog)
            self.save_output_files(reconciliation, messages_path, missing_path)
        except MalformedEntry as error:
            locale_error = LocaleError(
                LocaleErrorKind.MALFORMED, error.message, error.path
            )
            return LocaleReport.failed(locale, locale_error)
        except OSError as error:
            path = Path(error.filename) if error.filename else None
            message = error.strerror or str(error)
            return LocaleReport.failed(
                locale, LocaleError(LocaleErrorKind.IO, message, path)
            )

        return LocaleReport(
            locale=locale,
            outcome=reconciliation.outcome,
            merged=reconciliation.merged,
            orphaned=len(reconciliation.orphaned),
            extracted=reconciliation.extracted,
        )

    def save_output_files(
        self, reconciliation: Reconciliation, messages_path: Path, missing_path: Path
    ):
        # serialize both catalogs before touching any file
        main_text = str(reconciliation.main)
        missing_text = str(reconciliation.missing) if reconciliation.missing else None

        write_text(messages_path, main_text)
        if missing_text is None:
            remove_file(missing_path)
        else:
            write_text(missing_path, missing_text)

    def describe_locale(self, report: LocaleReport):
        for error in report.errors:
            print(
                f"Error processing locale '{report.locale}': {error}",
                file=sys.stderr,
            )

        if not self.verbose:
            return

        if report.outcome is LocaleOutcome.ERROR:
            print(f"  {ERROR_ICON} {report.locale}: failed")
        elif report.outcome is LocaleOutcome.MERGED:
            line = (
                f"  {MERGED_ICON} {report.locale}: {report.merged} translations merged"
                f" back from {MISSING_FILE_NAME}"
            )
            if report.orphaned:
                line += f", {report.orphaned} orphaned translations discarded"
            if report.extracted:
                line += f", {report.extracted} still missing"
            print(line)
        elif report.outcome is LocaleOutcome.EXTRACTED:
            print(
                f"  {DONE_ICON} {report.locale}: {report.extracted}"
                " missing translations extracted"
            )
        else:
            print(f"  {DONE_ICON} {report.locale}: no missing translations")

    def describe_results(self, summary: RunSummary):
        if self.verbose and summary.reports:
            data = [
                [
                    report.locale,
                    report.outcome.value,
                    report.merged,
                    report.orphaned,
                    report.extracted,
                    len(report.errors),
                ]
                for report in summary.reports
            ]
            headers = ["Locale", "Outcome", "Merged", "Orphaned", "Extracted", "Errors"]

            print()
            print("[Locales]")
            print(tabulate(data, headers=headers, tablefmt="simple_grid"))
            print()
            print(
                f"Merged {summary.count(LocaleOutcome.MERGED)},"
                f" extracted {summary.count(LocaleOutcome.EXTRACTED)},"
                f" clean {summary.count(LocaleOutcome.CLEAN)}"
                f" and failed {summary.count(LocaleOutcome.ERROR)} locales"
            )

        print(
            f"Processing complete: {summary.processed} locales processed,"
            f" {summary.errors} errors"
        )


def main(argv: Optional["list[str]"] = None):
    parser = argparse.ArgumentParser(
        prog="po-missing",
        description="Scans locale directories for PO files and extracts missing"
        f" translations into {MISSING_FILE_NAME} files",
    )
    parser.add_argument(
        "-b",
        "--base-path",
        default=DEFAULT_BASE_PATH,
        help=f"Base directory containing locale folders (default: {DEFAULT_BASE_PATH})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log more information"
    )
    parser.add_argument(
        "-w",
        "--wrap-width",
        type=int,
        default=DEFAULT_WRAP_WIDTH,
        help="Wrap long strings and comments at this width when writing PO files,"
        " 0 disables wrapping",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")

    po_missing = POMissing(**vars(parser.parse_args(argv)))
    try:
        po_missing.start()
    except MissingBasePath as error:
        print(f"Error: {error}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
