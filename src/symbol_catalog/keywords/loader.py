# src/symbol_catalog/keywords/loader.py
from __future__ import annotations
from pathlib import Path
from typing import List, Tuple, Union

import yaml

from symbol_catalog.errors import KeywordTableError


def _names(term, raw) -> Tuple[str, ...]:
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, (list, tuple)):
        raise KeywordTableError(f"Keyword '{term}' must map to a list of symbol names")
    out = []
    for n in raw:
        if not isinstance(n, str) or not n.strip():
            raise KeywordTableError(f"Keyword '{term}' has a non-string or empty symbol name: {n!r}")
        out.append(n.strip())
    return tuple(out)


def parse_keyword_table(root) -> List[Tuple[str, Tuple[str, ...]]]:
    """
    Supports:
      - mapping form:  {term: [names...]}
      - list form:     [{term: ..., symbols: [...]}, ...]  (a term may repeat)
      - either of the above under a top-level 'keywords' key
    Returns ordered (term, names) pairs; terms are lowercased and trimmed.
    """
    if root is None:
        return []
    if isinstance(root, dict) and set(root) == {"keywords"}:
        root = root["keywords"]

    pairs: List[Tuple[str, Tuple[str, ...]]] = []
    if isinstance(root, dict):
        items = list(root.items())
    elif isinstance(root, list):
        items = []
        for item in root:
            if not isinstance(item, dict):
                raise KeywordTableError(f"Keyword list items must be mappings, got {type(item).__name__}")
            term = item.get("term") or item.get("keyword")
            if term is None:
                raise KeywordTableError(f"Keyword item without 'term': {item!r}")
            items.append((term, item.get("symbols", item.get("names", []))))
    else:
        raise KeywordTableError(f"Keyword table root must be a mapping or a list, got {type(root).__name__}")

    for term, raw in items:
        if not isinstance(term, str) or not term.strip():
            raise KeywordTableError(f"Keyword terms must be non-empty strings, got {term!r}")
        pairs.append((term.strip().lower(), _names(term, raw)))
    return pairs


def load_keyword_table(path: Union[str, Path]) -> List[Tuple[str, Tuple[str, ...]]]:
    """
    Load a keyword table from YAML.

    Raises:
        FileNotFoundError: If the file doesn't exist
        KeywordTableError: If the YAML is invalid or has the wrong shape
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Keyword table not found: {path}")
    try:
        root = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise KeywordTableError(f"Invalid YAML in keyword table {path}: {e}") from e
    return parse_keyword_table(root)
