"""
duplifind — find files with identical content in a directory tree.

Core features:
- Recursive scan with an optional exact-name or "*.ext" filter
- Two-phase detection: size grouping, then streaming SHA-256 verification
- Optional xxHash64 quick check and multi-threaded hashing
- CLI interface for headless/server usage
"""

# Get version
from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("duplifind")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from duplifind.commands import DeduplicationCommand, find_duplicates
from duplifind.core import (
    DeduplicationParams, DuplicateGroup, File, FileFilter, FilterMode, hash_file, passes)
from duplifind.reporting import ConsoleReporter, LoggingReporter
from duplifind.utils.convert_utils import ConvertUtils

__all__ = [
    "DeduplicationCommand",
    "find_duplicates",
    "DeduplicationParams",
    "DuplicateGroup",
    "File",
    "FileFilter",
    "FilterMode",
    "hash_file",
    "passes",
    "ConsoleReporter",
    "LoggingReporter",
    "ConvertUtils",
    "__version__",
]
