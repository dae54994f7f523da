# src/symbol_catalog/taxonomy/classifier.py
from __future__ import annotations
from typing import Dict, Optional, Tuple

import pandas as pd  # only needed for classify_batch

from .categories import DEFAULT_TAXONOMY
from .schema import Category, Taxonomy


def classify_symbol(name: str, taxonomy: Taxonomy = DEFAULT_TAXONOMY) -> Tuple[str, Dict]:
    """
    Returns: (category_id, details_dict)
    details: {
        "rule": "keyword" | "fallback",
        "keyword": matched keyword or None,
    }
    """
    name_norm = (name or "").lower()

    # Walk categories in declaration order; first keyword hit wins.
    for category in taxonomy.declared:
        for kw in category.keywords:
            if kw in name_norm:
                return category.cid, {"rule": "keyword", "keyword": kw}

    return taxonomy.catch_all.cid, {"rule": "fallback", "keyword": None}


def classify(name: str, taxonomy: Taxonomy = DEFAULT_TAXONOMY) -> Category:
    cid, _ = classify_symbol(name, taxonomy)
    return taxonomy.get(cid)  # type: ignore[return-value]


def classify_batch(
    df: pd.DataFrame,
    name_col: str = "name",
    taxonomy: Optional[Taxonomy] = None,
) -> pd.DataFrame:
    """
    Returns a copy with 'category' (cid) and 'category_keyword' columns;
    category_keyword is None where no keyword matched.
    Missing names classify as the catch-all.
    """
    taxonomy = taxonomy or DEFAULT_TAXONOMY
    out = df.copy()
    cids = []
    hits = []
    for n in out[name_col].fillna(""):
        cid, det = classify_symbol(str(n), taxonomy)
        cids.append(cid)
        hits.append(det["keyword"])
    out["category"] = pd.Series(cids, index=out.index, dtype=object)
    # object dtype keeps misses as None on every pandas version
    out["category_keyword"] = pd.Series(hits, index=out.index, dtype=object)
    return out
