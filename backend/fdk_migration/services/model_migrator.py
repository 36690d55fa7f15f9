"""
Legacy model -> normalized model
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from fdk_shared.i18n import from_single_value, from_value_list
from fdk_shared.models.catalog import LegacyElement, LegacyModel, Model, ModelElement
from fdk_shared.utils.id_generator import generate_uuid, today_iso

DEFAULT_VERSION = "1.0"


def migrate_elements(elements: Iterable[LegacyElement]) -> List[ModelElement]:
    """Inline element definitions with localized name and description"""
    return [
        ModelElement(
            name=from_single_value(element.name),
            description=from_single_value(element.description),
            phases=list(element.phases),
        )
        for element in elements
    ]


class ModelMigrator:
    """Maps legacy models onto the normalized schema."""

    def __init__(
        self,
        id_factory: Callable[[], str] = generate_uuid,
        today: Callable[[], str] = today_iso,
    ):
        self.id_factory = id_factory
        self.today = today

    def migrate(self, model: LegacyModel) -> Model:
        return Model(
            id=self.id_factory(),
            code=model.id,
            version=model.version or DEFAULT_VERSION,
            last_change=model.last_change or self.today(),
            name=from_single_value(model.title),
            image=model.image or "",
            domain=from_single_value(model.category),
            description=from_single_value(model.description),
            tags=from_value_list(model.tags),
            phases=list(model.phases),
            elements=migrate_elements(model.elements),
            related_elements=[],
        )

    def migrate_all(self, models: Iterable[LegacyModel]) -> List[Model]:
        return [self.migrate(model) for model in models]


def migrate_models(
    models: Iterable[LegacyModel],
    id_factory: Optional[Callable[[], str]] = None,
    today: Optional[Callable[[], str]] = None,
) -> List[Model]:
    migrator = ModelMigrator(id_factory=id_factory or generate_uuid, today=today or today_iso)
    return migrator.migrate_all(models)
