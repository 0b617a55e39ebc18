"""
Reporters: the output side of a duplicate search.

ConsoleReporter writes the human-readable report used by the CLI.
LoggingReporter sends everything to the `logging` module and is the default
when the engine is used as a library.
"""
import logging
import sys
from typing import List, Optional, TextIO

from duplifind.core.filters import FileFilter
from duplifind.core.interfaces import Reporter
from duplifind.core.models import DuplicateGroup
from duplifind.utils.convert_utils import ConvertUtils

logger = logging.getLogger(__name__)


class ConsoleReporter(Reporter):
    """Prints the search summary and results to stdout, warnings to stderr."""

    def __init__(self, quiet: bool = False, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        self.quiet = quiet
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def describe_search(self, root: str, file_filter: FileFilter) -> None:
        if self.quiet:
            return
        print(f"🔍 Searching '{root}' for duplicates among {file_filter.description}...", file=self.stdout)

    def report_warning(self, path: str, error: Exception) -> None:
        if self.quiet:
            return
        print(f"⚠️  Could not hash '{path}': {error}", file=self.stderr)

    def render(self, groups: List[DuplicateGroup]) -> None:
        if self.quiet:
            return

        if not groups:
            print("✅ No duplicate files found.", file=self.stdout)
            return

        total_files = sum(g.duplicate_count for g in groups)
        print(f"\n✨ Found {ConvertUtils.plural(len(groups), 'duplicate group')} "
              f"({total_files} files):\n", file=self.stdout)

        for idx, group in enumerate(groups, 1):
            size_str = ConvertUtils.bytes_to_human(group.size)
            print(f"--- Group {idx} ({ConvertUtils.plural(group.duplicate_count, 'file')}, "
                  f"{size_str} each) ---", file=self.stdout)
            for path in group.paths:
                print(f"  - {path}", file=self.stdout)
            print(file=self.stdout)

        wasted = sum(g.wasted_bytes for g in groups)
        print(f"Total reclaimable space: {ConvertUtils.bytes_to_human(wasted)}", file=self.stdout)


class LoggingReporter(Reporter):
    """Routes reporter calls to a logger."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def describe_search(self, root: str, file_filter: FileFilter) -> None:
        self.log.info(f"Searching '{root}' for duplicates among {file_filter.description}")

    def report_warning(self, path: str, error: Exception) -> None:
        self.log.warning(f"Could not hash '{path}': {error}")

    def render(self, groups: List[DuplicateGroup]) -> None:
        self.log.info(f"Found {len(groups)} duplicate groups")
        for idx, group in enumerate(groups, 1):
            self.log.info(f"Group {idx} ({group.size} bytes): {', '.join(group.paths)}")
