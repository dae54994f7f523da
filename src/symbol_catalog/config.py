# src/symbol_catalog/config.py
from dataclasses import dataclass, asdict
import os
from typing import Any, Dict

from dotenv import load_dotenv

from symbol_catalog.errors import ConfigError

# a local .env never overrides variables already set in the process
load_dotenv(override=False)

DUPLICATE_POLICIES = ("first", "error")


def _env_bool(name, default=False):
    v = os.getenv(name)
    if v is None: return default
    return str(v).strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True)
class Settings:
    # -------- General ----------
    log_level: str          = os.getenv("SYMBOL_CATALOG_LOG_LEVEL", "INFO")

    # -------- Catalog ----------
    duplicate_policy: str   = os.getenv("SYMBOL_CATALOG_DUPLICATES", "first")

    # -------- Keywords ---------
    keyword_table_path: str = os.getenv("SYMBOL_CATALOG_KEYWORDS", "")
    keyword_merge: bool     = _env_bool("SYMBOL_CATALOG_KEYWORD_MERGE", True)

    # -------- Build ------------
    background_build: bool  = _env_bool("SYMBOL_CATALOG_BACKGROUND_BUILD", False)

    def __post_init__(self):
        if self.duplicate_policy not in DUPLICATE_POLICIES:
            raise ConfigError(
                f"duplicate_policy must be one of {DUPLICATE_POLICIES}, got {self.duplicate_policy!r}"
            )

    # helper: convert to dict (useful for logging)
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_overrides(**kwargs) -> "Settings":
        """
        Build Settings and apply runtime overrides.
        Only keys that match fields will be overridden; None values are ignored.
        """
        current = Settings().to_dict()
        current.update({k: v for k, v in kwargs.items() if k in current and v is not None})
        return Settings(**current)  # type: ignore[arg-type]
