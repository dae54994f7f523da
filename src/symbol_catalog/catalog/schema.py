# src/symbol_catalog/catalog/schema.py
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Entry:
    """A named catalog item. Ordering and equality follow ``name`` first."""
    name: str
    category: str  # taxonomy cid
