# src/symbol_catalog/taxonomy/schema.py
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

CATCH_ALL_CID = "all"

# ---- canonical data shapes ----
@dataclass(frozen=True)
class Category:
    cid: str
    name: str
    icon: str
    keywords: Tuple[str, ...] = ()

    @property
    def is_catch_all(self) -> bool:
        return self.cid == CATCH_ALL_CID


@dataclass(frozen=True)
class Taxonomy:
    """
    Ordered category table. Declaration order is the classification priority:
    the first declared category with a keyword contained in a name wins.
    The catch-all category carries no keywords and is never matched directly.
    """
    version: str
    categories: Tuple[Category, ...]
    _by_cid: Dict[str, Category] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        cids = [c.cid for c in self.categories]
        if len(set(cids)) != len(cids):
            raise ValueError(f"Duplicate category ids in taxonomy {self.version}: {cids}")
        if CATCH_ALL_CID not in cids:
            raise ValueError(f"Taxonomy {self.version} has no '{CATCH_ALL_CID}' category")
        object.__setattr__(self, "_by_cid", {c.cid: c for c in self.categories})

    @property
    def ordered_cids(self) -> List[str]:
        return [c.cid for c in self.categories]

    @property
    def cid2name(self) -> dict:
        return {c.cid: c.name for c in self.categories}

    @property
    def catch_all(self) -> Category:
        return self._by_cid[CATCH_ALL_CID]

    @property
    def declared(self) -> Tuple[Category, ...]:
        """Categories that take part in classification, in priority order."""
        return tuple(c for c in self.categories if not c.is_catch_all)

    def get(self, cid: Optional[str]) -> Optional[Category]:
        if cid is None:
            return None
        return self._by_cid.get(cid)

    def by_name(self, name: str) -> Optional[Category]:
        """Lookup by display name ("Objects & Tools") or by cid, case-insensitive."""
        key = (name or "").strip().casefold()
        for c in self.categories:
            if c.cid.casefold() == key or c.name.casefold() == key:
                return c
        return None
