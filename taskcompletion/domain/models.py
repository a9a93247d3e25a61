"""
Domain models for working windows, leave days and completion results.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import FrozenSet, Iterable, List, Tuple

from pendulum import DateTime

from .exceptions import InvalidWindowError

HOURS_IN_A_DAY = 24


@dataclass(frozen=True)
class WorkWindow:
    """
    Represents the immutable daily working window.

    Invariant: start_hour and end_hour are in [0, 23] and differ
    (nobody works 24 hours continuously).
    """
    start_hour: int
    end_hour: int

    def __post_init__(self):
        for hour in (self.start_hour, self.end_hour):
            if not 0 <= hour <= 23:
                raise InvalidWindowError(f"Hour must be between 0 and 23, got {hour}")
        if self.start_hour == self.end_hour:
            raise InvalidWindowError(
                f"Working hour start and end cannot be the same ({self.start_hour}:00)"
            )

    @property
    def crosses_midnight(self) -> bool:
        """True if the window starts in the evening and ends the next morning."""
        return self.end_hour < self.start_hour

    def hours_available(self, current_hour: int) -> int:
        """
        Hours left in today's window from current_hour on.

        Only used for the first (partial) day. For midnight-crossing windows
        the post-midnight part belongs to the next calendar day and is not
        counted here.
        """
        if self.crosses_midnight:
            return HOURS_IN_A_DAY - max(current_hour, self.start_hour)
        if current_hour >= self.end_hour:
            return 0
        return self.end_hour - max(current_hour, self.start_hour)

    def full_day_hours(self) -> int:
        """Hours available during a complete day's window."""
        if self.crosses_midnight:
            return self.end_hour + (HOURS_IN_A_DAY - self.start_hour)
        return self.end_hour - self.start_hour

    def next_window_start_hour(self) -> int:
        """Hour of day at which work resumes on the following day."""
        if self.crosses_midnight:
            return 0
        return self.start_hour

    def __str__(self) -> str:
        return f"{self.start_hour:02d}:00 - {self.end_hour:02d}:00"


@dataclass(frozen=True)
class LeaveSet:
    """
    Calendar days on which no work happens.

    Membership is decided by (year, month, day) only; time of day is ignored.
    """
    days: FrozenSet[Tuple[int, int, int]] = frozenset()

    @classmethod
    def from_dates(cls, dates: Iterable[date]) -> "LeaveSet":
        """Build a leave set from date or datetime values."""
        return cls(days=frozenset(_day_key(d) for d in dates))

    def __contains__(self, value) -> bool:
        return _day_key(value) in self.days

    def __len__(self) -> int:
        return len(self.days)

    def sorted_dates(self) -> List[date]:
        """Return the leave days as plain dates in calendar order."""
        return [date(*key) for key in sorted(self.days)]


def _day_key(value) -> Tuple[int, int, int]:
    return (value.year, value.month, value.day)


@dataclass(frozen=True)
class WorkDay:
    """One simulated calendar day."""
    day: date
    hours_worked: int
    on_leave: bool = False


@dataclass
class CompletionResult:
    """
    Outcome of a completion-time simulation.
    """
    started_at: DateTime
    completed_at: DateTime
    required_hours: int
    window: WorkWindow
    days: List[WorkDay] = field(default_factory=list)

    @property
    def leave_days_skipped(self) -> int:
        return sum(1 for d in self.days if d.on_leave)

    def format_display(self) -> str:
        """
        Format the completion instant for display.
        Format: Task Completion Date: DD/MM/YYYY / Task Completion Time: HH:mm:ss
        """
        return (
            f"Task Completion Date: {self.completed_at.format('DD/MM/YYYY')}\n"
            f"Task Completion Time: {self.completed_at.format('HH:mm:ss')}"
        )
