"""
Utility functions shared by the library and the migration scripts
"""

from .id_generator import generate_uuid, today_iso

__all__ = ["generate_uuid", "today_iso"]
