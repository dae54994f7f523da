# src/symbol_catalog/catalog/index.py
"""
Category index: per-category buckets over the sorted catalog plus the
synthetic catch-all bucket holding every entry.
"""
from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from symbol_catalog.taxonomy import DEFAULT_TAXONOMY, Taxonomy

from .schema import Entry


class CategoryIndex:
    """
    Read-only after construction. Buckets keep catalog order; the catch-all
    bucket is the full catalog regardless of classification, so
    ``count(catch_all) == total``.
    """

    def __init__(self, entries: Iterable[Entry], taxonomy: Taxonomy = DEFAULT_TAXONOMY):
        self.taxonomy = taxonomy
        self._all: Tuple[Entry, ...] = tuple(entries)
        self._by_name: Mapping[str, Entry] = MappingProxyType({e.name: e for e in self._all})

        buckets: Dict[str, List[Entry]] = {cid: [] for cid in taxonomy.ordered_cids}
        catch_all = taxonomy.catch_all.cid
        for e in self._all:
            # entries classified into the catch-all live only in the "all" bucket
            if e.category != catch_all:
                buckets.setdefault(e.category, []).append(e)

        frozen: Dict[str, Tuple[Entry, ...]] = {cid: tuple(b) for cid, b in buckets.items()}
        frozen[catch_all] = self._all
        self._buckets: Mapping[str, Tuple[Entry, ...]] = MappingProxyType(frozen)

    @classmethod
    def build(cls, entries: Iterable[Entry], taxonomy: Taxonomy = DEFAULT_TAXONOMY) -> "CategoryIndex":
        return cls(entries, taxonomy)

    # ---- read API ----
    @property
    def entries(self) -> Tuple[Entry, ...]:
        return self._all

    @property
    def total(self) -> int:
        return len(self._all)

    def bucket(self, cid: Optional[str]) -> Tuple[Entry, ...]:
        """None or the catch-all id returns the full catalog; unknown ids return ()."""
        if cid is None:
            return self._all
        return self._buckets.get(cid, ())

    def count(self, cid: Optional[str]) -> int:
        return len(self.bucket(cid))

    def counts(self) -> Dict[str, int]:
        """cid -> bucket size, in taxonomy order (catch-all first)."""
        return {cid: len(self._buckets.get(cid, ())) for cid in self.taxonomy.ordered_cids}

    def get(self, name: str) -> Optional[Entry]:
        return self._by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._all)
