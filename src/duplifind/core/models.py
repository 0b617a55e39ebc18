"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for file scanning and duplicate detection.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Union
import os
from enum import Enum


# =============================
# Enums
# =============================

class Stage(str, Enum):
    SIZE = "Size grouping"
    QUICK = "Quick-check Hash"
    FULL = "Full Hash"


# ======================
#  Core Data Models
# ======================

@dataclass
class FileHashes:
    front: Optional[bytes] = None
    full: Optional[str] = None

    def __post_init__(self):
        if self.front is not None and not isinstance(self.front, bytes):
            raise ValueError("Field 'front' must be bytes or None")
        if self.full is not None and not isinstance(self.full, str):
            raise ValueError("Field 'full' must be str or None")


@dataclass
class File:
    """
    A regular, non-empty file discovered during the scan.
    Caches computed hashes so that each stage reads a file at most once.
    """
    path: str
    size: int  # in bytes
    name: Optional[str] = None
    hashes: FileHashes = field(default_factory=FileHashes)

    def __post_init__(self):
        """Extract basename from path if not provided."""
        if self.size < 0:
            raise ValueError("File size cannot be negative")
        if self.name is None:
            self.name = os.path.basename(self.path)

    def __repr__(self):
        return f"<File path={self.path}, size={self.size}>"


@dataclass
class DuplicateGroup:
    """
    A group of files with identical content.
    All files in the group have the same size and, once verified, the same digest.
    """
    size: int
    files: List[File]
    digest: Optional[str] = None

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.files)

    @property
    def paths(self) -> List[str]:
        return [f.path for f in self.files]

    @property
    def wasted_bytes(self) -> int:
        """Space taken by every copy except one."""
        return self.size * max(0, self.duplicate_count - 1)

    def __repr__(self):
        return f"<DuplicateGroup size={self.size}, count={len(self.files)}>"


@dataclass
class DeduplicationStats:
    """
    Statistics collected during the deduplication process.
    """
    total_time: float = 0.0
    stage_stats: Dict[str, Dict[str, Union[int, float]]] = field(default_factory=dict)

    def update_stage(
            self,
            stage_name: str,
            groups_found: int,
            files_processed: int,
            duration: float
    ) -> None:
        if stage_name not in self.stage_stats:
            self.stage_stats[stage_name] = {
                "groups": 0,
                "files": 0,
                "time": 0.0
            }
        self.stage_stats[stage_name]["groups"] += groups_found
        self.stage_stats[stage_name]["files"] += files_processed
        self.stage_stats[stage_name]["time"] += duration

    def print_summary(self) -> str:
        labels = {
            "size": "📁 Size Groups",
            "quick": "📄 Quick-check Hash Groups",
            "full": "🔍 Full Content Hash Groups",
        }

        lines = [
            "📊 Deduplication Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            "Stage: GROUPS / FILES / TIME"
        ]

        for stage, data in self.stage_stats.items():
            label = labels.get(stage.lower(), stage.title())
            lines.append(f"{label}: {data['groups']} / {data['files']} / {data['time']:.3f}s")

        return "\n".join(lines)


"""
DTO for deduplication parameters with built-in validation.
Interface-agnostic, shared by the CLI and the library entry points.
"""
from duplifind.core.filters import FileFilter


@dataclass
class DeduplicationParams:
    """Parameters for deduplication operation with validation."""
    root_dir: str
    file_filter: FileFilter = field(default_factory=FileFilter)
    workers: int = 1
    quick_check: bool = True

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if self.workers < 1:
            raise ValueError("Number of workers must be at least 1")

    @staticmethod
    def from_cli_values(
            root_dir: str,
            pattern: Optional[str] = None,
            workers: int = 1,
            quick_check: bool = True,
    ) -> 'DeduplicationParams':
        """
        Factory method to create params from raw command-line values.
        """
        return DeduplicationParams(
            root_dir=root_dir,
            file_filter=FileFilter.from_pattern(pattern),
            workers=workers,
            quick_check=quick_check,
        )
