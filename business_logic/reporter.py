"""Report rows derived from the ledger for the list and history commands.

Running tasks are reported in ledger order, which is not guaranteed to be
stable across runs. History is sorted by descending accumulated time; ties keep
ledger order.
"""
from typing import List, Optional

from business_logic.ledger import Ledger
from models import HistoryMode, ReportRow
from utils.time_utils import decompose, now_timestamp


class Reporter:
    """Builds table rows from a ledger without modifying it."""

    @staticmethod
    def render_running(ledger: Ledger, now: Optional[int] = None) -> List[ReportRow]:
        """
        One row per running task with the time elapsed since it started.

        Args:
            ledger: The ledger to report on
            now: Current instant in epoch seconds, defaults to the current time

        Returns:
            Rows in running_snapshot order
        """
        now = now_timestamp() if now is None else int(now)
        return [
            ReportRow.from_duration(name, decompose(max(0, now - started_at)))
            for name, started_at in ledger.running_snapshot()
        ]

    @staticmethod
    def render_history(ledger: Ledger, mode: HistoryMode = HistoryMode.SUM) -> List[ReportRow]:
        """
        One row per task with history, longest accumulated time first.

        Args:
            ledger: The ledger to report on
            mode: SUM reports the accumulated time, AVERAGE the accumulated
                time divided by the number of completed sessions

        Returns:
            Rows sorted by descending accumulated seconds
        """
        entries = sorted(ledger.history_snapshot(), key=lambda entry: -entry[1])

        rows = []
        for name, total in entries:
            value = total
            if mode is HistoryMode.AVERAGE:
                value = total // max(1, ledger.session_count(name))
            rows.append(ReportRow.from_duration(name, decompose(max(0, value))))
        return rows


def render_running(ledger: Ledger, now: Optional[int] = None) -> List[ReportRow]:
    """Module-level convenience function. See Reporter.render_running."""
    return Reporter.render_running(ledger, now)


def render_history(ledger: Ledger, mode: HistoryMode = HistoryMode.SUM) -> List[ReportRow]:
    """Module-level convenience function. See Reporter.render_history."""
    return Reporter.render_history(ledger, mode)
