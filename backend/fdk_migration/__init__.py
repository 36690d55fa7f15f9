"""
One-off migrations of the legacy catalog files to the normalized schema
"""

from .runner import run_document_migration, run_model_migration

__all__ = ["run_document_migration", "run_model_migration"]
