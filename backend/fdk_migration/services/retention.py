"""
Retention period parsing

Legacy documents carry the retention period as German free text. The
normalized value is a number of years, 0 for "keep indefinitely" and None
when nothing is specified.
"""

import re
from typing import Optional

INDEFINITE_RETENTION = 0

_INDEFINITE_MARKERS = ("bis Ersatz", "unbefristet")
_NO_RETENTION_MARKER = "keine Aufbewahrung"
_PURPOSE_MARKER = "bis Bearbeitungszweck entfällt"
_YEARS_RE = re.compile(r"(\d+)\s*Jahre?", re.IGNORECASE)


def parse_retention(text: Optional[str]) -> Optional[int]:
    """
    Parse a retention string into years.

    Checks run in a fixed order, so a text containing both an indefinite
    marker and "keine Aufbewahrung" resolves to indefinite.

    Examples:
        >>> parse_retention("10 Jahre")
        10
        >>> parse_retention("bis Ersatz")
        0
        >>> parse_retention("keine Aufbewahrung") is None
        True
    """
    if not text:
        return None

    if any(marker in text for marker in _INDEFINITE_MARKERS):
        return INDEFINITE_RETENTION

    if _NO_RETENTION_MARKER in text:
        return None

    # Kept until no longer needed for processing
    if _PURPOSE_MARKER in text:
        return INDEFINITE_RETENTION

    match = _YEARS_RE.search(text)
    if match:
        return int(match.group(1))

    return None


def describe_retention(years: Optional[int]) -> str:
    """Label used in the migration summary"""
    if years is None:
        return "null"
    if years == INDEFINITE_RETENTION:
        return "indefinitely"
    return f"{years} years"
