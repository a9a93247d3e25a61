"""
Core business logic for calculating when a task will be completed.

Pure domain logic: no prompts, no file access, no output formatting.
"""

import logging
from datetime import datetime

import pendulum
from pendulum import DateTime

from .exceptions import InvalidDurationError
from .models import CompletionResult, LeaveSet, WorkDay, WorkWindow

logger = logging.getLogger(__name__)


class CompletionSimulator:
    """
    Walks the calendar day by day until the required hours are worked.

    Algorithm:
    1. Work what is left of the first day's window
    2. Jump to the next day's window start (midnight for windows crossing midnight)
    3. Skip leave days entirely
    4. Consume one full window per working day
    5. Stop the remaining hours after the window start of the day that can hold them
    """

    def compute_completion(
        self,
        start: datetime,
        required_hours: int,
        window: WorkWindow,
        leaves: LeaveSet
    ) -> DateTime:
        """
        Return the instant at which the task is completed.

        Args:
            start: Instant the task is assigned
            required_hours: Working hours the task needs
            window: Daily working window
            leaves: Days on which no work happens

        Returns:
            Completion instant

        Raises:
            InvalidDurationError: If required_hours is negative
        """
        return self.simulate(start, required_hours, window, leaves).completed_at

    def simulate(
        self,
        start: datetime,
        required_hours: int,
        window: WorkWindow,
        leaves: LeaveSet
    ) -> CompletionResult:
        """
        Run the simulation and keep a record of every simulated day.
        """
        if required_hours < 0:
            raise InvalidDurationError(
                f"Time required must be a non-negative number of hours, got {required_hours}"
            )

        result = CompletionResult(
            started_at=start,
            completed_at=start,
            required_hours=required_hours,
            window=window
        )

        if required_hours == 0:
            return result

        if not isinstance(start, DateTime):
            start = pendulum.instance(start, tz=start.tzinfo)

        # First (partial) day
        worked = min(window.hours_available(start.hour), required_hours)
        remaining = required_hours - worked
        result.days.append(WorkDay(day=start.date(), hours_worked=worked))
        logger.debug("First day %s: %d hour(s) worked", start.to_date_string(), worked)

        # Finished on the first day: completion is the next window start
        cursor = self._move_to_next_day(start, window)
        result.completed_at = cursor

        while remaining > 0:
            if cursor.date() in leaves:
                logger.debug("Skipping leave day %s", cursor.to_date_string())
                result.days.append(WorkDay(day=cursor.date(), hours_worked=0, on_leave=True))
                cursor = self._move_to_next_day(cursor, window)
                continue

            available = window.full_day_hours()

            if remaining <= available:
                result.days.append(WorkDay(day=cursor.date(), hours_worked=remaining))
                result.completed_at = cursor.add(hours=remaining)
                remaining = 0
                break

            remaining -= available
            result.days.append(WorkDay(day=cursor.date(), hours_worked=available))
            logger.debug(
                "Worked %d hour(s) on %s, %d remaining",
                available,
                cursor.to_date_string(),
                remaining
            )
            cursor = self._move_to_next_day(cursor, window)

        return result

    @staticmethod
    def _move_to_next_day(instant: DateTime, window: WorkWindow) -> DateTime:
        """
        Return the start of the next day's work.

        For windows crossing midnight this is midnight itself, where the
        previous evening's shift continues.
        """
        return instant.add(days=1).set(
            hour=window.next_window_start_hour(),
            minute=0,
            second=0,
            microsecond=0
        )
