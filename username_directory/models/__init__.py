"""
In-memory data model for the username directory
"""
from .attempt_counter import AttemptCounter
from .registry import Registry
from .report import MostAttemptedReport

__all__ = ['AttemptCounter', 'Registry', 'MostAttemptedReport']
