# src/symbol_catalog/keywords/__init__.py
from .table import KEYWORD_TABLE
from .index import KeywordIndex
from .loader import load_keyword_table, parse_keyword_table

__all__ = ["KEYWORD_TABLE", "KeywordIndex", "load_keyword_table", "parse_keyword_table"]
