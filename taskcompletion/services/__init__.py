"""
Service layer helpers that orchestrate input conversion and domain logic.
"""

from .completion_service import CompletionService

__all__ = ["CompletionService"]
