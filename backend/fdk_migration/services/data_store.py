"""
JSON file store for the catalog data files

Each file holds one top-level array of records. Reads and writes are whole
file, UTF-8, pretty-printed with two-space indentation.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from fdk_shared.exceptions import DataFileFormatError, DataFileNotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class JsonDataStore:
    """Reads and writes record arrays below a data directory"""

    def __init__(self, data_dir: Union[str, Path], indent: int = 2):
        self.data_dir = Path(data_dir)
        self.indent = indent

    def path_for(self, file_name: str) -> Path:
        return self.data_dir / file_name

    def read_array(self, file_name: str) -> List[Any]:
        """
        Load a top-level JSON array.

        Raises:
            DataFileNotFoundError: file missing or unreadable
            DataFileFormatError: invalid JSON or not an array
        """
        path = self.path_for(file_name)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise DataFileNotFoundError(str(path), reason=str(e)) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise DataFileFormatError(str(path), reason=str(e)) from e

        if not isinstance(data, list):
            raise DataFileFormatError(str(path), reason=f"expected a JSON array, got {type(data).__name__}")

        logger.debug("Read %d records from %s", len(data), path)
        return data

    def read_records(self, file_name: str, model: Type[ModelT]) -> List[ModelT]:
        """Load a JSON array and validate every item as ``model``."""
        path = self.path_for(file_name)
        records: List[ModelT] = []
        for index, item in enumerate(self.read_array(file_name)):
            if not isinstance(item, dict):
                raise DataFileFormatError(str(path), reason="expected a JSON object", index=index)
            try:
                records.append(model.model_validate(item))
            except ValidationError as e:
                raise DataFileFormatError(str(path), reason=str(e), index=index) from e
        return records

    def write_records(self, file_name: str, records: Sequence[Union[BaseModel, Dict[str, Any]]]) -> Path:
        """Serialize records and overwrite the file. Returns the written path."""
        path = self.path_for(file_name)
        payload = [dump_record(record) for record in records]
        path.write_text(json.dumps(payload, indent=self.indent, ensure_ascii=False), encoding="utf-8")
        logger.debug("Wrote %d records to %s", len(payload), path)
        return path


def dump_record(record: Union[BaseModel, Dict[str, Any]]) -> Dict[str, Any]:
    """JSON-ready dict for a record model"""
    if isinstance(record, BaseModel):
        return record.model_dump(mode="json")
    return dict(record)
