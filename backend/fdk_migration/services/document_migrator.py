"""
Legacy document -> normalized document
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from fdk_migration.services.classification_index import ClassificationIndex
from fdk_migration.services.retention import parse_retention
from fdk_shared.i18n import from_single_value, from_value_list
from fdk_shared.models.catalog import Document, LegacyDocument
from fdk_shared.utils.id_generator import generate_uuid, today_iso

DEFAULT_VERSION = "1.0"


class DocumentMigrator:
    """
    Maps legacy documents onto the normalized schema.

    Args:
        index: Classification catalog lookup
        id_factory: Produces a fresh identifier per record
        today: Produces the ISO date used when a record has no last change
    """

    def __init__(
        self,
        index: ClassificationIndex,
        id_factory: Callable[[], str] = generate_uuid,
        today: Callable[[], str] = today_iso,
    ):
        self.index = index
        self.id_factory = id_factory
        self.today = today

    def migrate(self, doc: LegacyDocument) -> Document:
        """Migrate one document; the legacy id is kept as ``code``."""
        return Document(
            id=self.id_factory(),
            code=doc.id,
            version=doc.version or DEFAULT_VERSION,
            last_change=doc.last_change or self.today(),
            name=from_single_value(doc.title),
            image=doc.image or "",
            domain=from_single_value(doc.category),
            description=from_single_value(doc.description),
            tags=from_value_list(doc.tags),
            phases=list(doc.phases),
            formats=list(doc.formats),
            retention=parse_retention(doc.retention),
            related_elements=[],
            related_classifications=self.index.resolve_references(doc.classifications),
        )

    def migrate_all(self, docs: Iterable[LegacyDocument]) -> List[Document]:
        return [self.migrate(doc) for doc in docs]


def migrate_documents(
    docs: Iterable[LegacyDocument],
    index: ClassificationIndex,
    id_factory: Optional[Callable[[], str]] = None,
    today: Optional[Callable[[], str]] = None,
) -> List[Document]:
    migrator = DocumentMigrator(index, id_factory=id_factory or generate_uuid, today=today or today_iso)
    return migrator.migrate_all(docs)
