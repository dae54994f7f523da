# src/symbol_catalog/search/engine.py
"""
Query layer over one immutable catalog snapshot.

Name search filters a category bucket by case-insensitive substring.
Semantic search additionally admits entries the keyword index associates
with the query, restricted to the same category selection.
"""
from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Tuple, Union

from symbol_catalog.catalog import CategoryIndex, Entry
from symbol_catalog.keywords import KeywordIndex
from symbol_catalog.taxonomy import Category

CategoryArg = Union[Category, str, None]


class SearchEngine:
    def __init__(self, index: CategoryIndex, keywords: KeywordIndex):
        self.index = index
        self.keywords = keywords

    # ---- category resolution ----
    def _cid(self, category: CategoryArg) -> Optional[str]:
        """None / catch-all -> None (whole catalog). Accepts Category, cid or display name."""
        if category is None:
            return None
        if isinstance(category, Category):
            cat = category
        else:
            cat = self.index.taxonomy.get(category) or self.index.taxonomy.by_name(category)
            if cat is None:
                # unknown selection: keep it, bucket() answers with ()
                return category
        return None if cat.is_catch_all else cat.cid

    def symbols_for_category(self, category: CategoryArg = None) -> Tuple[Entry, ...]:
        return self.index.bucket(self._cid(category))

    def count(self, category: CategoryArg = None) -> int:
        return len(self.symbols_for_category(category))

    @property
    def total_count(self) -> int:
        return self.index.total

    def category_counts(self) -> Dict[str, int]:
        return self.index.counts()

    # ---- queries ----
    def search(self, query: str, category: CategoryArg = None) -> List[Entry]:
        """Name filter over the category bucket; an empty query returns the bucket unchanged."""
        results = self.symbols_for_category(category)
        if query:
            q = query.lower()
            results = tuple(e for e in results if q in e.name.lower())
        return list(results)

    def search_with_semantics(self, query: str, category: CategoryArg = None) -> List[Entry]:
        q = (query or "").strip().lower()
        if not q:
            return self.search("", category)

        cid = self._cid(category)
        found: Dict[str, Entry] = {e.name: e for e in self.search(query, category)}

        for name in self.keywords.symbols_for_keyword(q):
            entry = self.index.get(name)
            if entry is None:
                continue
            if cid is None or entry.category == cid:
                found.setdefault(entry.name, entry)

        return sorted(found.values(), key=lambda e: e.name)

    # ---- lookups for downstream consumers ----
    def symbol_named(self, name: str) -> Optional[Entry]:
        return self.index.get(name)

    def contains(self, name: str) -> bool:
        return name in self.index

    def category_of(self, name: str) -> Optional[Category]:
        entry = self.index.get(name)
        if entry is None:
            return None
        return self.index.taxonomy.get(entry.category)

    def keywords_for(self, name: str):
        return self.keywords.keywords_for_symbol(name)

    def partition_known(self, names: Iterable[str]) -> Tuple[List[str], List[str]]:
        """Split stored names into (known, unknown), input order preserved."""
        known: List[str] = []
        unknown: List[str] = []
        for n in names:
            (known if n in self.index else unknown).append(n)
        return known, unknown
