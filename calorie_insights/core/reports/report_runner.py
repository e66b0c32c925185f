"""
Report orchestration.

Runs every report over one immutable record set and collects the results
into a ReportBundle.
"""

from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from calorie_insights.core.config import ReportSettings
from calorie_insights.core.models import ConsumptionRecord, ReportBundle
from calorie_insights.observability.logger import get_logger, log_operation
from calorie_insights.observability.metrics import report_duration_seconds, track_duration

from .aggregations import (
    distinct_favorite_items,
    highest_protein_on,
    monthly_calorie_summary,
    top_by_protein,
    total_calories_per_user_per_day,
    users_with_most_days_under,
)

logger = get_logger(__name__)

# Presentation order; names match ReportBundle attributes
REPORT_NAMES = (
    "daily_totals",
    "days_under_threshold",
    "favorite_items",
    "highest_protein",
    "monthly_summary",
    "top_protein",
)


class ReportRunner:
    """
    Computes all reports for a record set.

    Reports share no mutable state, so they may run on a thread pool
    (``parallel=True``); the bundle is identical either way.
    """

    def __init__(self, settings: ReportSettings | None = None, max_workers: int | None = None):
        """
        Initialize the runner.

        Args:
            settings: Report parameters; defaults when None
            max_workers: Thread pool size for parallel runs
        """
        self.settings = settings or ReportSettings()
        self.max_workers = max_workers or len(REPORT_NAMES)

    def _report_functions(self) -> dict[str, Callable[[Sequence[ConsumptionRecord]], Any]]:
        s = self.settings
        return {
            "daily_totals": total_calories_per_user_per_day,
            "days_under_threshold": lambda records: users_with_most_days_under(records, s.calorie_threshold),
            "favorite_items": distinct_favorite_items,
            "highest_protein": lambda records: highest_protein_on(records, s.protein_date),
            "monthly_summary": lambda records: monthly_calorie_summary(records, s.monthly_min_calories),
            "top_protein": lambda records: top_by_protein(records, s.top_n),
        }

    def run_report(self, name: str, records: Sequence[ConsumptionRecord]) -> Any:
        """
        Compute a single report by name.

        Raises:
            KeyError: If the report name is unknown
        """
        functions = self._report_functions()
        if name not in functions:
            raise KeyError(f"Unknown report: {name}")

        logger.debug(f"Computing report {name}", extra={"report": name})
        with track_duration(report_duration_seconds, report=name):
            return functions[name](records)

    def run(self, records: Sequence[ConsumptionRecord], parallel: bool = False) -> ReportBundle:
        """
        Compute every report.

        Args:
            records: Decoded records (not modified)
            parallel: Run reports concurrently on a thread pool

        Returns:
            ReportBundle with one attribute per report
        """
        # Freeze the input so every report sees the same sequence
        snapshot = tuple(records)

        with log_operation("Computing reports", logger=logger, records=len(snapshot), parallel=parallel):
            if parallel:
                with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="report-worker") as executor:
                    futures = {name: executor.submit(self.run_report, name, snapshot) for name in REPORT_NAMES}
                    results = {name: future.result() for name, future in futures.items()}
            else:
                results = {name: self.run_report(name, snapshot) for name in REPORT_NAMES}

        return ReportBundle(record_count=len(snapshot), **results)
