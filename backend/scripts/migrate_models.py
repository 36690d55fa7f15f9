#!/usr/bin/env python3
"""
Migrate models.json to the normalized schema.

Run: python backend/scripts/migrate_models.py
The data directory comes from FDK_DATA_DIR (default: <repo>/data).
"""

from fdk_migration.runner import run_model_migration


def main() -> None:
    run_model_migration()


if __name__ == "__main__":
    main()
