"""
Classification catalog lookup for legacy documents

Legacy documents reference classifications by free text, e.g.
``{"eBKP-H": ["100 – Immobilienmanagement"]}``. The index maps them to
catalog identifiers by (system, code).
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from fdk_shared.models.catalog import ClassificationEntry, ClassificationRef

logger = logging.getLogger(__name__)

# Legacy system names -> catalog system names
SYSTEM_ALIASES: Dict[str, str] = {
    "eBKP-H": "eBKP-H",
    "DIN276": "DIN276",
    "Uniformat II 2010": "Uniformat II",
    "Uniformat II": "Uniformat II",
    "KBOB": "KBOB",
    "GEFMA": "GEFMA",
    "SIA": "SIA",
    "GIF": "GIF",
    "RCIS": "RCIS",
}

# "100 – Immobilienmanagement", "D 0165 – Dokumentation Hochbau"
_CODE_PREFIX_RE = re.compile(r"^([A-Z0-9.\s]+)\s*[–-]\s*", re.IGNORECASE)


def normalize_system_name(system: str) -> str:
    """Catalog name for a legacy system name; unknown names pass through."""
    return SYSTEM_ALIASES.get(system, system)


def parse_classification_code(full_code: str) -> str:
    """
    Reduce a labelled code to its code token.

    Returns the trimmed prefix before the dash separator, or the first
    whitespace-delimited token when there is no separator.
    """
    match = _CODE_PREFIX_RE.match(full_code)
    if match:
        return match.group(1).strip()
    parts = full_code.split()
    return parts[0] if parts else ""


class ClassificationIndex:
    """(system, code) -> catalog id"""

    def __init__(self, entries: Optional[Mapping[Tuple[str, str], str]] = None):
        self._by_system_code: Dict[Tuple[str, str], str] = dict(entries or {})

    @classmethod
    def from_catalog(cls, catalog: Iterable[ClassificationEntry]) -> "ClassificationIndex":
        index = cls()
        for entry in catalog:
            index.add(entry)
        return index

    def add(self, entry: ClassificationEntry) -> None:
        # Later entries win on duplicate keys
        key = (normalize_system_name(entry.system), entry.code)
        self._by_system_code[key] = entry.id

    def __len__(self) -> int:
        return len(self._by_system_code)

    def __contains__(self, key: Tuple[str, str]) -> bool:
        return key in self._by_system_code

    def lookup(self, system: str, full_code: str) -> Optional[str]:
        """
        Find the catalog id for a legacy (system, labelled code) pair.

        Returns:
            The id, or None when the catalog has no matching entry
        """
        key = (normalize_system_name(system), parse_classification_code(full_code))
        return self._by_system_code.get(key)

    def resolve_references(self, classifications: Mapping[str, Any]) -> List[ClassificationRef]:
        """
        Resolve a legacy ``{system: [codes]}`` map into catalog references.

        Codes without a catalog entry are dropped. Input order is kept and
        duplicates are not collapsed.
        """
        refs: List[ClassificationRef] = []
        for system, codes in classifications.items():
            if not isinstance(codes, list):
                continue
            for full_code in codes:
                if not isinstance(full_code, str):
                    continue
                clf_id = self.lookup(system, full_code)
                if clf_id is None:
                    logger.debug("Unresolved classification %s / %r", system, full_code)
                    continue
                refs.append(ClassificationRef(id=clf_id))
        return refs
