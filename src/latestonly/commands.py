"""
Unified command orchestrator for a deduplication run.
This is the single entry point for business logic — used by the CLI and by tests.
"""
import time
import logging
from pathlib import Path
from typing import Optional, Callable

from latestonly.core.models import DeduplicationParams, ReconcileResult
from latestonly.core.hash_index import HashIndex
from latestonly.core.reconciler import ReconcilerImpl
from latestonly.core.interfaces import Reconciler
from latestonly.services.deletion_service import DeletionExecutor

logger = logging.getLogger(__name__)


class DeduplicationCommand:
    """
    Orchestrates the entire workflow:
    1. Load the hash index from <directory>/results.json (empty if absent)
    2. Reconcile the directory against it
    3. Delete redundant files and save the updated index

    Usage:
        params = load_config("config.json")
        result = DeduplicationCommand().execute(params)
        print(result.stats.print_summary())
    """

    def __init__(
            self,
            reconciler: Optional[Reconciler] = None,
            executor: Optional[DeletionExecutor] = None
    ):
        self._reconciler = reconciler
        self._executor = executor or DeletionExecutor()

    @staticmethod
    def index_path(params: DeduplicationParams) -> Path:
        return Path(params.directory) / params.results_filename

    def execute(
            self,
            params: DeduplicationParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> ReconcileResult:
        """
        Run a full deduplication pass.

        Args:
            params: Validated run parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            ReconcileResult with the final index, the applied deletion set and statistics

        Raises:
            LatestOnlyError: On any configuration, index or filesystem failure
        """
        start_time = time.time()
        logger.debug(f"Run started: directory={params.directory}, algorithm={params.algorithm.value}")

        index = HashIndex.load(self.index_path(params))
        reconciler = self._reconciler or ReconcilerImpl(
            heal_stale_entries=params.heal_stale_entries,
            results_filename=params.results_filename,
        )
        result = reconciler.reconcile(
            params.directory, params.algorithm, index, progress_callback=progress_callback)

        result.stats.files_deleted = self._executor.apply(
            result.deletion_set,
            result.index,
            self.index_path(params),
            progress_callback=progress_callback,
        )
        result.stats.total_time = time.time() - start_time
        return result
