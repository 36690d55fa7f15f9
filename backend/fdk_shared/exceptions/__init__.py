"""
Domain exceptions
"""

from .base import DomainException
from .migration import DataFileFormatError, DataFileNotFoundError, MigrationException

__all__ = [
    "DomainException",
    "MigrationException",
    "DataFileNotFoundError",
    "DataFileFormatError",
]
