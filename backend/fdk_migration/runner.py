"""
Migration runs

Each run reads its input files from the configured data directory,
migrates every record, overwrites the output file in place and prints a
summary. Missing or malformed input files abort the run before anything is
written.
"""

from __future__ import annotations

from typing import Callable, Optional

from fdk_migration.services.classification_index import ClassificationIndex
from fdk_migration.services.data_store import JsonDataStore
from fdk_migration.services.document_migrator import DocumentMigrator
from fdk_migration.services.model_migrator import ModelMigrator
from fdk_migration.services.summary import (
    DocumentMigrationSummary,
    ModelMigrationSummary,
    format_document_summary,
    format_model_summary,
    summarize_documents,
    summarize_models,
)
from fdk_shared.config.settings import ApplicationSettings, get_settings
from fdk_shared.i18n import set_language
from fdk_shared.models.catalog import ClassificationEntry, LegacyDocument, LegacyModel
from fdk_shared.utils.app_logger import configure_logging, get_migration_logger
from fdk_shared.utils.id_generator import generate_uuid, today_iso

Printer = Callable[[str], None]


def _prepare(settings: ApplicationSettings, name: str):
    configure_logging(settings.logging.log_level, settings.logging.log_format.value)
    set_language(settings.i18n.default_language)
    store = JsonDataStore(settings.paths.data_dir)
    logger = get_migration_logger(name, level=settings.logging.log_level, fmt=settings.logging.log_format.value)
    return store, logger


def run_document_migration(
    settings: Optional[ApplicationSettings] = None,
    *,
    id_factory: Callable[[], str] = generate_uuid,
    today: Callable[[], str] = today_iso,
    printer: Printer = print,
) -> DocumentMigrationSummary:
    """Migrate the documents file against the classification catalog."""
    settings = settings or get_settings()
    store, logger = _prepare(settings, "documents")
    paths = settings.paths

    documents = store.read_records(paths.documents_file, LegacyDocument)
    catalog = store.read_records(paths.classifications_file, ClassificationEntry)
    logger.info("Loaded %d documents", len(documents))
    logger.info("Loaded %d classifications", len(catalog))

    index = ClassificationIndex.from_catalog(catalog)
    logger.info("Migrating documents...")
    migrated = DocumentMigrator(index, id_factory=id_factory, today=today).migrate_all(documents)

    output_path = store.write_records(paths.documents_file, migrated)
    logger.info("Written to: %s", output_path)

    summary = summarize_documents(migrated)
    for line in format_document_summary(summary, migrated[0] if migrated else None):
        printer(line)
    return summary


def run_model_migration(
    settings: Optional[ApplicationSettings] = None,
    *,
    id_factory: Callable[[], str] = generate_uuid,
    today: Callable[[], str] = today_iso,
    printer: Printer = print,
) -> ModelMigrationSummary:
    """Migrate the models file."""
    settings = settings or get_settings()
    store, logger = _prepare(settings, "models")
    paths = settings.paths

    models = store.read_records(paths.models_file, LegacyModel)
    logger.info("Loaded %d models", len(models))

    logger.info("Migrating models...")
    migrated = ModelMigrator(id_factory=id_factory, today=today).migrate_all(models)

    output_path = store.write_records(paths.models_file, migrated)
    logger.info("Written to: %s", output_path)

    summary = summarize_models(migrated)
    for line in format_model_summary(summary, migrated[0] if migrated else None):
        printer(line)
    return summary
