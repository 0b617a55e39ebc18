"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/stages.py
Pipeline stages of duplifind's duplicate detection engine.

CLASS HIERARCHY
---------------
SizeStageImpl     : Initial size-based grouping (SizeStage interface)
HashStageBase     : Shared loop for stages that split groups by a content hash
QuickHashStage    : xxHash64 of the first bytes, only for files larger than the quick-check window
FullHashStage     : Final SHA-256 verification, sets DuplicateGroup.digest

STAGE CONTRACTS
---------------
Each stage implements a consistent `process()` interface that:
  • Accepts candidate groups from previous stage
  • Returns refined groups (2+ files each) for the next stage
  • Reports progress via callback (stage name, processed count, total count)

OPTIMIZATIONS
-----------------
• Size pruning: files without a same-size peer are never read
• Quick check: large same-size files that differ in their first bytes are split
  before the full hash, so they are read once, and only partially
"""

from typing import List, Dict, Optional, Any
from duplifind.core.models import File, DuplicateGroup, Stage
from duplifind.core.grouper import FileGrouperImpl
from duplifind.core.hasher import QUICK_CHECK_SIZE
from duplifind.core.interfaces import SizeStage, HashStage, ProgressCallback


# =============================
# Hashing Base Class
# =============================
class HashStageBase(HashStage):
    """
    Base class for stages that split groups by a content hash.
    """

    def __init__(self, grouper: FileGrouperImpl):
        self.grouper = grouper

    def get_stage_name(self) -> str:
        raise NotImplementedError

    def _should_hash(self, group: DuplicateGroup) -> bool:
        """Groups rejected here are passed on to the next stage unchanged."""
        return True

    def _group_files(self, files: List[File]) -> Dict[Any, List[File]]:
        """
        Groups files by this stage's hash.

        Args:
            files (List[File]): A list of same-size files to group.

        Returns:
            Dict[Any, List[File]]: Hash values mapped to the 2+ files sharing them.
        """
        raise NotImplementedError

    def _make_group(self, size: int, key: Any, files: List[File]) -> DuplicateGroup:
        return DuplicateGroup(size=size, files=files)

    def process(
        self,
        groups: List[DuplicateGroup],
        progress_callback: Optional[ProgressCallback] = None
    ) -> List[DuplicateGroup]:
        new_groups = []
        total_files = sum(len(group.files) for group in groups)
        processed_files = 0

        for group in groups:
            if not self._should_hash(group):
                new_groups.append(group)
            else:
                for hkey, files_in_group in self._group_files(group.files).items():
                    new_groups.append(self._make_group(group.size, hkey, files_in_group))

            processed_files += len(group.files)
            if progress_callback:
                progress_callback(self.get_stage_name(), processed_files, total_files)

        return new_groups


# =============================
# Individual Stages
# =============================
class SizeStageImpl(SizeStage):
    def __init__(self, grouper: FileGrouperImpl):
        self.grouper = grouper

    def process(
            self,
            files: List[File],
            progress_callback: Optional[ProgressCallback] = None
    ) -> List[DuplicateGroup]:
        """
        Group by file size.
        Returns list of DuplicateGroups with 2+ files of same size.
        """
        size_groups = self.grouper.group_by_size(files)
        groups = [
            DuplicateGroup(size=size, files=files_list)
            for size, files_list in size_groups.items()
        ]

        if progress_callback:
            total_files = len(files)
            progress_callback(Stage.SIZE.value, total_files, total_files)  # Fake instant progress

        return groups


class QuickHashStage(HashStageBase):
    def __init__(self, grouper: FileGrouperImpl, min_size: int = QUICK_CHECK_SIZE):
        super().__init__(grouper)
        self.min_size = min_size

    def get_stage_name(self) -> str:
        return Stage.QUICK.value

    def _should_hash(self, group: DuplicateGroup) -> bool:
        # The full hash of a file this small reads the same bytes
        return group.size > self.min_size

    def _group_files(self, files: List[File]) -> Dict[bytes, List[File]]:
        return self.grouper.group_by_front_hash(files)


class FullHashStage(HashStageBase):
    def get_stage_name(self) -> str:
        return Stage.FULL.value

    def _group_files(self, files: List[File]) -> Dict[str, List[File]]:
        return self.grouper.group_by_full_hash(files)

    def _make_group(self, size: int, key: str, files: List[File]) -> DuplicateGroup:
        return DuplicateGroup(size=size, files=files, digest=key)
