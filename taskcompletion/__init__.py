"""
taskcompletion - estimate when a task is finished given working hours and leave days.
"""

__version__ = "0.1.0"
