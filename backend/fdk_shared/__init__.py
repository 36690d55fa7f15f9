"""
Shared building blocks for the Fachdatenkatalog: localization helpers,
record models, settings and logging.
"""
