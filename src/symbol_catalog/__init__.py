# src/symbol_catalog/__init__.py
"""
In-memory catalog and search index over named symbol assets.

Typical use::

    from symbol_catalog import get_engine
    engine = get_engine()
    engine.search_with_semantics("delete", category="objects_tools")
"""
from .catalog import CategoryIndex, Entry, load_catalog
from .config import Settings
from .errors import CatalogError, ConfigError, DuplicateSymbolError, KeywordTableError
from .keywords import KeywordIndex
from .search import SearchEngine
from .snapshot import (
    CatalogSnapshot, SnapshotHolder, build_snapshot, configure, get_engine, get_snapshot,
)
from .taxonomy import DEFAULT_TAXONOMY, Category, Taxonomy, classify

__all__ = [
    "CategoryIndex", "Entry", "load_catalog",
    "Settings",
    "CatalogError", "ConfigError", "DuplicateSymbolError", "KeywordTableError",
    "KeywordIndex", "SearchEngine",
    "CatalogSnapshot", "SnapshotHolder", "build_snapshot", "configure", "get_engine", "get_snapshot",
    "DEFAULT_TAXONOMY", "Category", "Taxonomy", "classify",
]
