"""
Catalog package: identifier source, loader and category index.
"""
from .schema import Entry
from .loader import dedupe_identifiers, load_catalog
from .index import CategoryIndex
from .symbols import SYMBOL_GROUPS, all_symbol_names

__all__ = ["Entry", "dedupe_identifiers", "load_catalog", "CategoryIndex",
           "SYMBOL_GROUPS", "all_symbol_names"]
