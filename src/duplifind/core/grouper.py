"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Implements file grouping strategies using File objects and Hasher.

Hash keys can be computed on a shared thread pool. Results are always collected
on the calling thread, in the original file order, and a group is partitioned only
after every key of that group is known. Files whose key cannot be computed are
reported through the Reporter and left out.
"""

from concurrent.futures import Executor
from typing import List, Dict, Tuple, Any, Callable, Optional
from collections import defaultdict
import logging

from duplifind.core.interfaces import FileGrouper, Hasher, Reporter
from duplifind.core.models import File
from duplifind.core.hasher import HasherImpl

logger = logging.getLogger(__name__)


class FileGrouperImpl(FileGrouper):
    """
    A concrete implementation of FileGrouper.
    Uses an injected Hasher instance for flexibility and testability.
    """

    def __init__(
            self,
            hasher: Hasher = None,
            reporter: Optional[Reporter] = None,
            executor: Optional[Executor] = None
    ):
        self.hasher = hasher or HasherImpl()
        self.reporter = reporter
        self.executor = executor

    def group_by_size(self, files: List[File]) -> Dict[int, List[File]]:
        """Groups files by their size."""
        return self._group_by(files, lambda f: f.size)

    def group_by_front_hash(self, files: List[File]) -> Dict[bytes, List[File]]:
        """Groups files by the quick-check hash of their first bytes."""
        return self._group_by(files, self.hasher.compute_front_hash)

    def group_by_full_hash(self, files: List[File]) -> Dict[str, List[File]]:
        """Groups files by full content hash."""
        return self._group_by(files, self.hasher.compute_full_hash)

    def _compute_keys(
            self,
            files: List[File],
            key_func: Callable[[File], Any]
    ) -> List[Tuple[File, Any]]:
        """
        Computes key_func for every file, on the executor if one is set.
        Files whose key raises OSError are reported and dropped.
        """
        if self.executor is None or len(files) < 2:
            pending = [(file, None) for file in files]
        else:
            pending = [(file, self.executor.submit(key_func, file)) for file in files]

        keyed = []
        for file, future in pending:
            try:
                key = future.result() if future is not None else key_func(file)
            except OSError as e:
                self._report_failure(file, e)
                continue
            keyed.append((file, key))
        return keyed

    def _group_by(self, files: List[File], key_func: Callable[[File], Any]) -> Dict[Any, List[File]]:
        """
        Helper method to group files by any computed key.
        Args:
            files: List of files to group
            key_func: Function that computes a hashable key from a File
        Returns:
            Dict[key, List[File]] holding only groups with 2+ files
        """
        groups = defaultdict(list)
        for file, key in self._compute_keys(files, key_func):
            groups[key].append(file)

        return {key: group for key, group in groups.items() if len(group) >= 2}

    def _report_failure(self, file: File, error: OSError) -> None:
        if self.reporter is not None:
            self.reporter.report_warning(file.path, error)
        else:
            logger.warning(f"Could not hash {file.path}: {error}")
