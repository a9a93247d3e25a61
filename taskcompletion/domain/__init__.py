"""
Domain layer - Pure business logic without external dependencies.
"""

from .completion_simulator import CompletionSimulator
from .exceptions import InvalidDurationError, InvalidWindowError, TaskCompletionError
from .hour_parser import HourParseResult, format_twelve_hour, parse_twelve_hour
from .models import CompletionResult, LeaveSet, WorkDay, WorkWindow

__all__ = [
    "CompletionResult",
    "CompletionSimulator",
    "HourParseResult",
    "InvalidDurationError",
    "InvalidWindowError",
    "LeaveSet",
    "TaskCompletionError",
    "WorkDay",
    "WorkWindow",
    "format_twelve_hour",
    "parse_twelve_hour",
]
