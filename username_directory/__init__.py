"""
username-directory: concurrent in-memory username registration directory
"""
from .exceptions import (
    DirectoryServiceError,
    InvalidArgumentError,
    EmptyCounterError,
)
from .models import MostAttemptedReport
from .services import UsernameDirectory, get_service

__version__ = "1.0.0"

__all__ = [
    'UsernameDirectory',
    'MostAttemptedReport',
    'DirectoryServiceError',
    'InvalidArgumentError',
    'EmptyCounterError',
    'get_service',
]
