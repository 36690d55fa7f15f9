from .classification_index import ClassificationIndex, normalize_system_name, parse_classification_code
from .data_store import JsonDataStore
from .document_migrator import DocumentMigrator, migrate_documents
from .model_migrator import ModelMigrator, migrate_elements, migrate_models
from .retention import parse_retention

__all__ = [
    "ClassificationIndex",
    "normalize_system_name",
    "parse_classification_code",
    "JsonDataStore",
    "DocumentMigrator",
    "migrate_documents",
    "ModelMigrator",
    "migrate_elements",
    "migrate_models",
    "parse_retention",
]
