"""
Application service for estimating task completion.

The service turns the user-facing inputs (12-hour strings, a list of leave
dates) into domain objects and delegates the actual calculation to the
domain-level ``CompletionSimulator``. This keeps the CLI thin and lets the
simulator stay free of parsing concerns.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable, Optional

from ..domain.exceptions import InvalidWindowError
from ..domain.hour_parser import parse_twelve_hour
from ..domain.models import CompletionResult, LeaveSet, WorkWindow
from ..domain.completion_simulator import CompletionSimulator

logger = logging.getLogger(__name__)


class CompletionService:
    """
    Orchestrates input conversion and the completion simulation.
    """

    def __init__(self, simulator: Optional[CompletionSimulator] = None) -> None:
        self._simulator = simulator or CompletionSimulator()

    def calculate(
        self,
        *,
        start: datetime,
        required_hours: int,
        working_hour_start: str,
        working_hour_end: str,
        leaves: Iterable[date] = (),
    ) -> CompletionResult:
        """
        Parse the working window, build the leave set and run the simulation.

        Raises:
            InvalidWindowError: If the window strings are malformed or equal
            InvalidDurationError: If required_hours is negative
        """
        window = self.build_window(working_hour_start, working_hour_end)
        leave_set = LeaveSet.from_dates(leaves)

        logger.info(
            "Calculating completion for %d hour(s) from %s, window %s, %d leave day(s)",
            required_hours,
            start,
            window,
            len(leave_set),
        )

        result = self._simulator.simulate(start, required_hours, window, leave_set)

        logger.info("Task completes at %s", result.completed_at)
        return result

    @staticmethod
    def build_window(working_hour_start: str, working_hour_end: str) -> WorkWindow:
        """Convert two "HH AM/PM" strings into a validated WorkWindow."""
        start_result = parse_twelve_hour(working_hour_start)
        end_result = parse_twelve_hour(working_hour_end)

        for result in (start_result, end_result):
            if not result.ok:
                raise InvalidWindowError(
                    f"12 hour time format (HH AM/PM) is required: {result.error}"
                )

        return WorkWindow(start_hour=start_result.hour, end_hour=end_result.hour)
