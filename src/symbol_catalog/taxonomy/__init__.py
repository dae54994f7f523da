# src/symbol_catalog/taxonomy/__init__.py
from .schema import CATCH_ALL_CID, Category, Taxonomy
from .categories import CATEGORY_TABLE, DEFAULT_TAXONOMY
from .classifier import classify, classify_batch, classify_symbol

__all__ = [
    "CATCH_ALL_CID", "Category", "Taxonomy",
    "CATEGORY_TABLE", "DEFAULT_TAXONOMY",
    "classify", "classify_batch", "classify_symbol",
]
