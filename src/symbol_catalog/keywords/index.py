# src/symbol_catalog/keywords/index.py
"""
Bidirectional index between everyday vocabulary and symbol names.

The forward table (term -> names) is built once from curated pairs and
inverted into a reverse table (name -> terms). Both are frozen afterwards.
"""
from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Set, Tuple

from .table import KEYWORD_TABLE

logger = logging.getLogger(__name__)

_EMPTY: FrozenSet[str] = frozenset()


def _norm(query: str) -> str:
    return (query or "").lower().strip()


class KeywordIndex:
    def __init__(self, pairs: Iterable[Tuple[str, Iterable[str]]] = KEYWORD_TABLE, merge: bool = True):
        """
        Args:
            pairs: (term, names) pairs; a term may appear more than once
            merge: union the names of a repeated term (True) or let the later
                definition replace the earlier one (False)
        """
        forward: Dict[str, Set[str]] = {}
        repeated: List[str] = []
        for term, names in pairs:
            key = _norm(term)
            if not key:
                continue
            if key in forward:
                repeated.append(key)
                if not merge:
                    forward[key] = set()
            forward.setdefault(key, set()).update(names)

        if repeated:
            logger.warning("Keyword terms defined more than once (%s): %s",
                           "merged" if merge else "last wins", ", ".join(sorted(set(repeated))))

        reverse: Dict[str, Set[str]] = {}
        for term, names in forward.items():
            for name in names:
                reverse.setdefault(name, set()).add(term)

        self._forward: Mapping[str, FrozenSet[str]] = MappingProxyType(
            {t: frozenset(n) for t, n in forward.items()})
        self._reverse: Mapping[str, FrozenSet[str]] = MappingProxyType(
            {n: frozenset(t) for n, t in reverse.items()})

    # ---- read-only views ----
    @property
    def forward(self) -> Mapping[str, FrozenSet[str]]:
        return self._forward

    @property
    def reverse(self) -> Mapping[str, FrozenSet[str]]:
        return self._reverse

    def __len__(self) -> int:
        return len(self._forward)

    def all_keywords(self) -> List[str]:
        return sorted(self._forward)

    # ---- lookups ----
    def symbols_for_keyword(self, query: str) -> FrozenSet[str]:
        """
        Exact term hit returns that term's names. Otherwise union the names of
        every term that contains the query or is contained in it.
        """
        q = _norm(query)
        if not q:
            return _EMPTY

        exact = self._forward.get(q)
        if exact is not None:
            return exact

        out: Set[str] = set()
        for term, names in self._forward.items():
            if q in term or term in q:
                out.update(names)
        return frozenset(out)

    def has_semantic_match(self, query: str) -> bool:
        q = _norm(query)
        if not q:
            return False
        return any(q in term or term in q for term in self._forward)

    def keywords_for_symbol(self, name: str) -> FrozenSet[str]:
        return self._reverse.get(name, _EMPTY)
