#!/usr/bin/env python3
"""
Migrate documents.json to the normalized schema.

Run: python backend/scripts/migrate_documents.py
The data directory comes from FDK_DATA_DIR (default: <repo>/data).
"""

from fdk_migration.runner import run_document_migration


def main() -> None:
    run_document_migration()


if __name__ == "__main__":
    main()
