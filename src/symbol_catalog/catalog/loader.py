# src/symbol_catalog/catalog/loader.py
"""
Catalog loader: turns raw identifier strings into sorted, classified entries.
"""
from __future__ import annotations
import logging
from typing import Iterable, List, Tuple

from symbol_catalog.errors import DuplicateSymbolError
from symbol_catalog.taxonomy import DEFAULT_TAXONOMY, Taxonomy, classify_symbol

from .schema import Entry

logger = logging.getLogger(__name__)


def dedupe_identifiers(identifiers: Iterable[str], policy: str = "first") -> Tuple[List[str], List[str]]:
    """
    Apply the duplicate policy to raw identifiers.

    Args:
        identifiers: Raw identifier strings in source order
        policy: "first" keeps the first occurrence; "error" raises on any repeat

    Returns:
        Tuple of (unique identifiers in first-seen order, repeated identifiers)

    Raises:
        DuplicateSymbolError: If policy is "error" and any identifier repeats
    """
    seen = set()
    unique: List[str] = []
    dupes: List[str] = []
    for ident in identifiers:
        if ident in seen:
            dupes.append(ident)
            continue
        seen.add(ident)
        unique.append(ident)

    if dupes:
        if policy == "error":
            raise DuplicateSymbolError(dupes)
        logger.warning("Dropped %d duplicate identifier(s), first occurrence kept: %s",
                       len(dupes), ", ".join(sorted(set(dupes))))
    return unique, dupes


def load_catalog(
    identifiers: Iterable[str],
    taxonomy: Taxonomy = DEFAULT_TAXONOMY,
    duplicate_policy: str = "first",
) -> Tuple[Entry, ...]:
    """
    Build the immutable catalog: one Entry per distinct identifier, each
    classified once, sorted by ordinal string order of the name.

    An empty input yields an empty catalog.
    """
    unique, _ = dedupe_identifiers(identifiers or (), duplicate_policy)
    entries = [Entry(name, classify_symbol(name, taxonomy)[0]) for name in unique]
    entries.sort(key=lambda e: e.name)
    return tuple(entries)
