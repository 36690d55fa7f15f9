"""
ID Generator utilities
Fresh identifiers and date stamps for migrated records
"""

import uuid
from datetime import datetime, timezone


def generate_uuid() -> str:
    """Random (version 4) UUID as a string"""
    return str(uuid.uuid4())


def today_iso() -> str:
    """Current UTC calendar date, e.g. '2024-05-31'"""
    return datetime.now(timezone.utc).date().isoformat()
