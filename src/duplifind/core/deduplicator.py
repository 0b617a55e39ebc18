"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

deduplicator.py
Implements the pipeline-based duplicate detection engine using File objects.
Stages:
    - quick check on : size → quick-check hash → full hash
    - quick check off: size → full hash
With params.workers > 1 the hash stages share one thread pool for the whole run.
"""
import time
import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import List, Tuple, Optional
from duplifind.core.models import File, DuplicateGroup, DeduplicationStats, DeduplicationParams
from duplifind.core.grouper import FileGrouperImpl
from duplifind.core.hasher import HasherImpl
from duplifind.core.interfaces import Deduplicator, Hasher, HashStage, Reporter, ProgressCallback
from duplifind.core.stages import SizeStageImpl, QuickHashStage, FullHashStage

logger = logging.getLogger(__name__)


# =============================
# Main Deduplicator Class
# =============================
class DeduplicatorImpl(Deduplicator):
    """
    Implements multi-stage duplicate detection using a pipeline architecture.
    Collects statistics for every stage.
    """
    def __init__(self, hasher: Optional[Hasher] = None, reporter: Optional[Reporter] = None):
        self.hasher = hasher or HasherImpl()
        self.reporter = reporter

    def find_duplicates(
        self,
        files: List[File],
        params: DeduplicationParams,
        progress_callback: Optional[ProgressCallback] = None
    ) -> Tuple[List[DuplicateGroup], DeduplicationStats]:
        """
        Main duplicate detection pipeline using File objects.
        Args:
            files: List of scanned file objects
            params: Run configuration (worker count, quick check)
            progress_callback (Optional[Callable[[str, int, int], None]]): Reports progress per stage.
        Returns:
            Tuple[List[DuplicateGroup], DeduplicationStats]
        """
        if params.workers > 1:
            with ThreadPoolExecutor(max_workers=params.workers, thread_name_prefix="duplifind-hash") as executor:
                return self._run(files, params, executor, progress_callback)
        return self._run(files, params, None, progress_callback)

    def _run(
        self,
        files: List[File],
        params: DeduplicationParams,
        executor: Optional[Executor],
        progress_callback: Optional[ProgressCallback]
    ) -> Tuple[List[DuplicateGroup], DeduplicationStats]:
        stats = DeduplicationStats()
        total_start_time = time.time()
        grouper = FileGrouperImpl(self.hasher, reporter=self.reporter, executor=executor)

        # Initial stage: group by size
        start_time = time.time()
        groups = SizeStageImpl(grouper).process(files, progress_callback=progress_callback)
        DeduplicatorImpl._update_stats(stats, "size", time.time() - start_time, groups)

        # Run all stages in sequence
        for stage_name, stage in self._build_pipeline(grouper, params):
            if not groups:
                break
            start_time = time.time()
            groups = stage.process(groups, progress_callback=progress_callback)
            duration = time.time() - start_time
            DeduplicatorImpl._update_stats(stats, stage_name, duration, groups)
            logger.debug(f"Stage '{stage_name}' left {len(groups)} groups in {duration:.3f}s")

        # Sort by descending size
        groups.sort(key=lambda g: -g.size)

        # Finalize stats
        stats.total_time = time.time() - total_start_time

        return groups, stats

    @staticmethod
    def _build_pipeline(grouper: FileGrouperImpl, params: DeduplicationParams) -> List[Tuple[str, HashStage]]:
        """Builds the hash stages that follow size grouping."""
        pipeline = []
        if params.quick_check:
            pipeline.append(("quick", QuickHashStage(grouper)))
        pipeline.append(("full", FullHashStage(grouper)))
        return pipeline

    @staticmethod
    def _update_stats(
        stats: DeduplicationStats,
        stage: str,
        duration: float,
        groups: List[DuplicateGroup]
    ):
        """
        Helper to update DeduplicationStats object.
        """
        stats.update_stage(
            stage_name=stage,
            groups_found=len(groups),
            files_processed=sum(len(g.files) for g in groups),
            duration=duration
        )
