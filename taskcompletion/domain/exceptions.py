"""
Domain-specific exception hierarchy for the task completion calculator.
"""


class TaskCompletionError(Exception):
    """Base class for all application-level errors."""


class InvalidDurationError(TaskCompletionError):
    """Raised when the required working time is negative."""


class InvalidWindowError(TaskCompletionError):
    """Raised when a working-hour window cannot be built from the given hours."""
