"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate detection system.
These protocols use Python's `typing.Protocol` for structural typing, so test doubles
and alternative implementations plug in without inheritance.

Key Components:
---------------
- HashAlgorithm: Factory for hashlib-style hash objects (SHA-256, xxHash64).
- Hasher: Computes the quick-check and full content hashes of files.
- FileScanner: Walks a directory tree and returns candidate files.
- FileGrouper: Groups files by size or hash values.
- Reporter: Receives recoverable failures and renders final results.
- SizeStage / HashStage: Individual stages of the pipeline.
- Deduplicator: The engine coordinating all stages.
"""

from typing import Protocol, List, Dict, Tuple, Optional, Callable, Any
from duplifind.core.models import (
    File,
    DeduplicationParams,
    DuplicateGroup,
    DeduplicationStats,
)
from duplifind.core.filters import FileFilter

ProgressCallback = Callable[[str, int, Optional[int]], None]


# ===== Interfaces =====

class HashAlgorithm(Protocol):
    """
    Interface for streaming hash algorithms.

    Allows plugging in different hashing functions like SHA-256 or xxHash
    without affecting the rest of the duplicate detection logic.
    """
    name: str

    def create(self) -> Any:
        """Returns a fresh object exposing update(), digest() and hexdigest()."""
        ...


class Hasher(Protocol):
    """Interface for hashing file content."""
    def compute_front_hash(self, file: File) -> bytes: ...
    def compute_full_hash(self, file: File) -> str: ...


class FileScanner(Protocol):
    """
    Interface for scanning file systems and collecting candidate files.
    """
    def scan(self, progress_callback: Optional[ProgressCallback] = None) -> List[File]:
        """
        Scan files from the configured directory.

        Args:
            progress_callback: Optional callback for reporting progress (stage, current, total).

        Returns:
            Non-empty regular files that pass the configured filter, in discovery order.
        """
        ...


class FileGrouper(Protocol):
    """
    Interface for grouping files by size or content hashes.
    Every method drops groups with fewer than two files.
    """
    def group_by_size(self, files: List[File]) -> Dict[int, List[File]]: ...
    def group_by_front_hash(self, files: List[File]) -> Dict[bytes, List[File]]: ...
    def group_by_full_hash(self, files: List[File]) -> Dict[str, List[File]]: ...


class Reporter(Protocol):
    """
    Output collaborator of the core engine.
    """
    def describe_search(self, root: str, file_filter: FileFilter) -> None:
        """Announce the run configuration before scanning starts."""
        ...

    def report_warning(self, path: str, error: Exception) -> None:
        """Called for every file that could not be hashed."""
        ...

    def render(self, groups: List[DuplicateGroup]) -> None:
        """Present the final duplicate groups."""
        ...


# =============================
# Stage Interfaces
# =============================

class SizeStage(Protocol):
    def process(
        self,
        files: List[File],
        progress_callback: Optional[ProgressCallback] = None
    ) -> List[DuplicateGroup]:
        """
        Group files by size to find initial duplicate candidates.

        Returns:
            List of groups where each contains 2+ files of the same size.
        """
        ...


class HashStage(Protocol):
    def get_stage_name(self) -> str:
        """Return the name of this stage (used in progress and stats)."""
        ...

    def process(
        self,
        groups: List[DuplicateGroup],
        progress_callback: Optional[ProgressCallback] = None
    ) -> List[DuplicateGroup]:
        """
        Split every group by this stage's hash.

        Returns:
            Refined groups with 2+ files each.
        """
        ...


class Deduplicator(Protocol):
    """
    Interface for the main duplicate detection engine.

    Coordinates the stages (size → quick-check hash → full hash).
    Collects statistics about the process.
    """
    def find_duplicates(
        self,
        files: List[File],
        params: DeduplicationParams,
        progress_callback: Optional[ProgressCallback] = None
    ) -> Tuple[List[DuplicateGroup], DeduplicationStats]:
        """
        Run the pipeline on already-scanned files.

        Returns:
            A tuple containing:
                - List of verified duplicate groups
                - Statistics collected during processing
        """
        ...
