"""
Record models for the catalog data files
"""

from .catalog import (
    ClassificationEntry,
    ClassificationRef,
    Document,
    LegacyDocument,
    LegacyElement,
    LegacyModel,
    Model,
    ModelElement,
)
from .i18n import LocalizedTextLike

__all__ = [
    "ClassificationEntry",
    "ClassificationRef",
    "Document",
    "LegacyDocument",
    "LegacyElement",
    "LegacyModel",
    "Model",
    "ModelElement",
    "LocalizedTextLike",
]
