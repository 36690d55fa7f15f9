#!/usr/bin/env python3
"""
Setup script for the kbob-fachdatenkatalog tooling

Installs the localization helpers (fdk_shared) and the legacy data
migrations (fdk_migration) from the backend/ directory.
"""

from setuptools import setup, find_packages

setup(
    name="kbob-fachdatenkatalog",
    version="0.1.0",
    package_dir={"": "backend"},
    packages=find_packages(where="backend", exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        # 📋 Data Validation & Settings
        "pydantic>=2.6,<3",
        "pydantic-settings>=2.1.0",
        "python-dotenv>=1.0.0",

        # 📝 Logging
        "python-json-logger>=2.0.7",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    scripts=[
        "backend/scripts/migrate_documents.py",
        "backend/scripts/migrate_models.py",
    ],
)
