"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements file scanning with os.scandir.
Features:
- Recursively scans directories, depth-first, in directory listing order
- Never follows symbolic links; only regular files become candidates
- Skips zero-byte files and files rejected by the filename filter
- Returns a List containing scanned files

Entries that cannot be listed or whose type cannot be determined are skipped.
Failing to read the size of an in-scope regular file aborts the scan with OSError.
"""

import os
from typing import Iterator, List, Optional
from pathlib import Path
import time
import logging

logger = logging.getLogger(__name__)

# Local imports
from duplifind.core.models import File
from duplifind.core.filters import FileFilter
from duplifind.core.interfaces import FileScanner, ProgressCallback

PROGRESS_INTERVAL = 5000  # Update every 5,000 files


class FileScannerImpl(FileScanner):
    """
    Scans a directory tree and collects files passing the filename filter.

    Attributes:
        root_dir: Root directory to scan
        file_filter: Compiled --file-filter pattern
    """

    def __init__(self, root_dir: str, file_filter: Optional[FileFilter] = None):
        self.root_dir = root_dir
        self.file_filter = file_filter or FileFilter()

    def scan(self, progress_callback: Optional[ProgressCallback] = None) -> List[File]:
        """
        Single-pass scanner with progress updates and debug logging.
        Returns a filtered list of files found in the directory tree.
        """
        logger.debug(f"Root directory: {self.root_dir}")
        logger.debug(f"Filter: {self.file_filter.description}")

        root_path = Path(self.root_dir)

        # Validate root directory exists
        if not root_path.exists():
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise FileNotFoundError(error_msg)
        if not root_path.is_dir():
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise NotADirectoryError(error_msg)

        found_files = []
        processed_files = 0
        progress_counter = 0
        start_time = time.time()

        for entry in self._walk(self.root_dir):
            file_info = self._process_file(entry)
            if file_info:
                found_files.append(file_info)
            processed_files += 1
            progress_counter += 1

            if progress_callback and progress_counter >= PROGRESS_INTERVAL:
                progress_callback('scanning', processed_files, None)
                progress_counter = 0

        # Final update for small datasets
        if progress_callback and progress_counter > 0:
            progress_callback('scanning', processed_files, None)

        elapsed_time = time.time() - start_time
        logger.debug(f"Total scan time: {elapsed_time:.2f} seconds")
        logger.debug(f"Scan completed. Found {len(found_files)} matching files.")

        return found_files

    @staticmethod
    def _walk(directory: str) -> Iterator[os.DirEntry]:
        """Yields every regular file below directory. Unreadable entries are skipped."""
        # Subdirectories are pushed in reverse so they are visited in listing order
        stack = [directory]
        while stack:
            current = stack.pop()
            try:
                with os.scandir(current) as it:
                    entries = list(it)
            except OSError as e:
                logger.debug(f"Skipping inaccessible directory {current}: {e}")
                continue

            subdirs = []
            for entry in entries:
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                    is_file = entry.is_file(follow_symlinks=False)
                except OSError as e:
                    logger.debug(f"Could not determine type of {entry.path}: {e}")
                    continue

                if is_dir:
                    subdirs.append(entry.path)
                elif is_file:
                    yield entry
                else:
                    logger.debug(f"Skipping non-regular file: {entry.path}")

            stack.extend(reversed(subdirs))

    def _process_file(self, entry: os.DirEntry) -> Optional[File]:
        """
        Return a File for a regular file if it passes the filter and is not empty.
        Raises OSError if the size of an in-scope file cannot be read.
        """
        if not self.file_filter.passes(entry.name):
            logger.debug(f"Skipping {entry.path} (filtered out)")
            return None

        size = self._read_size(entry)
        if size == 0:
            logger.debug(f"Skipping zero-byte file: {entry.path}")
            return None

        logger.debug(f"Accepted file: {entry.name} ({size} bytes)")
        return File(path=entry.path, size=size, name=entry.name)

    @staticmethod
    def _read_size(entry: os.DirEntry) -> int:
        try:
            return entry.stat(follow_symlinks=False).st_size
        except OSError:
            logger.error(f"Could not read metadata of {entry.path}")
            raise
