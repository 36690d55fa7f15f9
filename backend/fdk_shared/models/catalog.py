"""
Record models for the Fachdatenkatalog data files

Legacy models describe the flat schema the files are migrated from and are
lenient: every field is optional, null collections become empty lists and
unknown fields are ignored. Normalized models describe the migrated schema;
their field order is the key order written to disk.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fdk_shared.value_objects.localized_text import LocalizedText


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


class ClassificationEntry(BaseModel):
    """One row of the classification catalog"""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str = Field(..., description="Catalog identifier")
    system: str = Field(..., description="Classification system name, e.g. 'eBKP-H'")
    code: str = Field(..., description="Authoritative short code, e.g. '100'")


class ClassificationRef(BaseModel):
    """Reference into the classification catalog"""

    id: str


class _LegacyRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    id: Optional[str] = None
    version: Optional[str] = None
    last_change: Optional[str] = Field(None, alias="lastChange")
    title: Optional[str] = None
    image: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    tags: List[Any] = Field(default_factory=list)
    phases: List[Any] = Field(default_factory=list)

    @field_validator("tags", "phases", mode="before")
    @classmethod
    def _coerce_list(cls, v):
        return _as_list(v)


class LegacyDocument(_LegacyRecord):
    """Document in the flat legacy schema"""

    formats: List[Any] = Field(default_factory=list)
    retention: Optional[str] = None
    classifications: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("formats", mode="before")
    @classmethod
    def _coerce_formats(cls, v):
        return _as_list(v)

    @field_validator("classifications", mode="before")
    @classmethod
    def _coerce_classifications(cls, v):
        return v if isinstance(v, dict) else {}


class LegacyElement(BaseModel):
    """Inline element of a legacy model"""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    name: Optional[str] = None
    description: Optional[str] = None
    phases: List[Any] = Field(default_factory=list)

    @field_validator("phases", mode="before")
    @classmethod
    def _coerce_phases(cls, v):
        return _as_list(v)


class LegacyModel(_LegacyRecord):
    """Model in the flat legacy schema"""

    elements: List[LegacyElement] = Field(default_factory=list)

    @field_validator("elements", mode="before")
    @classmethod
    def _coerce_elements(cls, v):
        return [item for item in _as_list(v) if isinstance(item, dict)]


class _NormalizedRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Generated UUID")
    code: Optional[str] = Field(None, description="Legacy identifier")
    version: str = "1.0"
    last_change: str = Field(..., description="ISO calendar date")
    name: LocalizedText = Field(default_factory=LocalizedText)
    image: str = ""
    domain: LocalizedText = Field(default_factory=LocalizedText)
    description: LocalizedText = Field(default_factory=LocalizedText)
    tags: List[LocalizedText] = Field(default_factory=list)
    phases: List[Any] = Field(default_factory=list)


class Document(_NormalizedRecord):
    """Document in the normalized schema"""

    formats: List[Any] = Field(default_factory=list)
    retention: Optional[int] = Field(None, description="Years; 0 = indefinitely, None = not specified")
    related_elements: List[Any] = Field(default_factory=list)
    related_classifications: List[ClassificationRef] = Field(default_factory=list)


class ModelElement(BaseModel):
    """Inline element of a normalized model"""

    model_config = ConfigDict(frozen=True)

    name: LocalizedText = Field(default_factory=LocalizedText)
    description: LocalizedText = Field(default_factory=LocalizedText)
    phases: List[Any] = Field(default_factory=list)


class Model(_NormalizedRecord):
    """Model in the normalized schema"""

    elements: List[ModelElement] = Field(default_factory=list)
    related_elements: List[Any] = Field(default_factory=list)
