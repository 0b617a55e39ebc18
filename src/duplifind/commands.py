"""
Unified command orchestrator for duplicate detection.
This is the single source of truth for the workflow, used by the CLI and by library callers.
"""
from typing import List, Optional, Tuple, Union
import os
import logging

from duplifind.core.filters import FileFilter
from duplifind.core.models import DuplicateGroup, DeduplicationStats, DeduplicationParams, File
from duplifind.core.scanner import FileScannerImpl
from duplifind.core.deduplicator import DeduplicatorImpl
from duplifind.core.interfaces import Reporter, ProgressCallback
from duplifind.reporting import LoggingReporter

logger = logging.getLogger(__name__)


class DeduplicationCommand:
    """
    Orchestrates the entire workflow:
    1. Scan the root directory for candidate files
    2. Run the size → hash pipeline over them

    Usage:
        params = DeduplicationParams.from_cli_values("/data", "*.jpg")
        command = DeduplicationCommand(reporter=ConsoleReporter())
        groups, stats = command.execute(params, progress_callback=cli_progress_printer)

    Fatal errors (missing root, unreadable metadata of an in-scope file) are raised
    as OSError. Files that cannot be hashed go to reporter.report_warning().
    """

    def __init__(self, reporter: Optional[Reporter] = None):
        self.reporter = reporter or LoggingReporter()
        self._deduplicator = DeduplicatorImpl(reporter=self.reporter)
        self._files: List[File] = []

    def execute(
            self,
            params: DeduplicationParams,
            progress_callback: Optional[ProgressCallback] = None
    ) -> Tuple[List[DuplicateGroup], DeduplicationStats]:
        """
        Execute duplicate detection with given parameters.

        Args:
            params: Validated parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            Tuple of (duplicate_groups, statistics)

        Raises:
            OSError: If the root cannot be scanned or file metadata cannot be read
        """
        # Step 1: Scan files
        scanner = FileScannerImpl(root_dir=params.root_dir, file_filter=params.file_filter)
        self._files = scanner.scan(progress_callback=progress_callback)

        if not self._files:
            logger.debug("No files found matching filters")

        # Step 2: Find duplicates
        return self._deduplicator.find_duplicates(
            self._files,
            params,
            progress_callback=progress_callback
        )

    def get_files(self) -> List[File]:
        """Get scanned files after execution."""
        return self._files.copy()


def find_duplicates(
        root: Union[str, os.PathLike],
        file_filter: Optional[FileFilter] = None,
        reporter: Optional[Reporter] = None,
        workers: int = 1,
        quick_check: bool = True
) -> List[DuplicateGroup]:
    """
    Returns every group of 2+ non-empty files below root with identical content.
    Raises OSError on fatal errors, see DeduplicationCommand.
    """
    params = DeduplicationParams(
        root_dir=os.fspath(root),
        file_filter=file_filter or FileFilter(),
        workers=workers,
        quick_check=quick_check,
    )
    groups, _ = DeduplicationCommand(reporter=reporter).execute(params)
    return groups
