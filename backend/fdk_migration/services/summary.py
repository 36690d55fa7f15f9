"""
Migration run statistics

Informational only; printed after a run and returned to the caller.
"""

from __future__ import annotations

import json
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, Field

from fdk_migration.services.retention import describe_retention
from fdk_shared.models.catalog import Document, Model


def _count(counts: Dict[str, int], key: str) -> None:
    counts[key] = counts.get(key, 0) + 1


class DocumentMigrationSummary(BaseModel):
    total: int = 0
    with_classifications: int = 0
    with_phases: int = 0
    with_retention: int = 0
    retention_breakdown: Dict[str, int] = Field(default_factory=dict)


class ModelMigrationSummary(BaseModel):
    total: int = 0
    with_phases: int = 0
    with_elements: int = 0
    domain_breakdown: Dict[str, int] = Field(default_factory=dict)


def summarize_documents(documents: Sequence[Document]) -> DocumentMigrationSummary:
    retention_breakdown: Dict[str, int] = {}
    for doc in documents:
        _count(retention_breakdown, describe_retention(doc.retention))

    return DocumentMigrationSummary(
        total=len(documents),
        with_classifications=sum(1 for d in documents if d.related_classifications),
        with_phases=sum(1 for d in documents if d.phases),
        with_retention=sum(1 for d in documents if d.retention is not None),
        retention_breakdown=retention_breakdown,
    )


def summarize_models(models: Sequence[Model]) -> ModelMigrationSummary:
    domain_breakdown: Dict[str, int] = {}
    for model in models:
        _count(domain_breakdown, model.domain.de)

    return ModelMigrationSummary(
        total=len(models),
        with_phases=sum(1 for m in models if m.phases),
        with_elements=sum(1 for m in models if m.elements),
        domain_breakdown=domain_breakdown,
    )


def _sample_lines(title: str, sample: Optional[BaseModel]) -> List[str]:
    if sample is None:
        return []
    return ["", f"=== {title} ===", json.dumps(sample.model_dump(mode="json"), indent=2, ensure_ascii=False)]


def format_document_summary(summary: DocumentMigrationSummary, sample: Optional[Document] = None) -> List[str]:
    lines = [
        "",
        "=== MIGRATION COMPLETE ===",
        f"Total documents: {summary.total}",
        f"With classifications: {summary.with_classifications}",
        f"With phases: {summary.with_phases}",
        f"With retention specified: {summary.with_retention}",
        "",
        "Retention breakdown:",
    ]
    lines.extend(f"  {label}: {count}" for label, count in summary.retention_breakdown.items())
    lines.extend(_sample_lines("SAMPLE DOCUMENT", sample))
    return lines


def format_model_summary(summary: ModelMigrationSummary, sample: Optional[Model] = None) -> List[str]:
    lines = [
        "",
        "=== MIGRATION COMPLETE ===",
        f"Total models: {summary.total}",
        f"With phases: {summary.with_phases}",
        f"With inline elements: {summary.with_elements}",
        "",
        "Domain breakdown:",
    ]
    lines.extend(f"  {domain}: {count}" for domain, count in summary.domain_breakdown.items())
    lines.extend(_sample_lines("SAMPLE MODEL", sample))
    return lines
