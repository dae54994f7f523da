# src/symbol_catalog/errors.py
"""
Exceptions raised while *building* a catalog snapshot.

Query paths never raise; absence is reported with None or empty collections.
"""


class CatalogError(Exception):
    """Base class for catalog build failures."""


class DuplicateSymbolError(CatalogError):
    """An identifier occurs more than once and duplicate_policy is 'error'."""

    def __init__(self, names):
        self.names = sorted(set(names))
        super().__init__(f"Duplicate symbol identifiers: {', '.join(self.names)}")


class KeywordTableError(CatalogError):
    """A keyword table file could not be parsed into term -> names pairs."""


class ConfigError(CatalogError):
    """Settings carry an unsupported value."""
