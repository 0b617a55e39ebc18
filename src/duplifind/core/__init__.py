"""
Core duplicate detection engine — filter, scanner, hasher, grouper, and pipeline orchestrator.

This package contains the performance-critical foundation of duplifind:
- FileFilter: exact-name / "*.ext" filename filter
- FileScannerImpl: recursive directory traversal
- HasherImpl: streaming SHA-256 full hashes and xxHash64 quick-check hashes
- FileGrouperImpl: size and hash-based grouping with duplicate filtering
- DeduplicatorImpl: multi-stage pipeline (size → quick check → full hash)
- Models: File, DuplicateGroup, and configuration objects

All components are pure Python with no UI dependencies.
"""

from .filters import FileFilter, FilterMode, passes
from .scanner import FileScannerImpl
from .grouper import FileGrouperImpl
from .hasher import HasherImpl, Sha256AlgorithmImpl, XXHashAlgorithmImpl, hash_file
from .deduplicator import DeduplicatorImpl
from .models import (
    File, DuplicateGroup, DeduplicationParams, DeduplicationStats, FileHashes, Stage)

__all__ = [
    "FileFilter",
    "FilterMode",
    "passes",
    "FileScannerImpl",
    "FileGrouperImpl",
    "HasherImpl",
    "Sha256AlgorithmImpl",
    "XXHashAlgorithmImpl",
    "hash_file",
    "DeduplicatorImpl",
    "File",
    "DuplicateGroup",
    "DeduplicationParams",
    "DeduplicationStats",
    "FileHashes",
    "Stage",
]
