import pytest

from symbol_catalog.config import Settings
from symbol_catalog.errors import ConfigError


def test_defaults():
    cfg = Settings()
    assert cfg.duplicate_policy in ("first", "error")
    assert isinstance(cfg.keyword_merge, bool)
    assert set(cfg.to_dict()) == {
        "log_level", "duplicate_policy", "keyword_table_path", "keyword_merge", "background_build",
    }


def test_from_overrides_ignores_unknown_and_none():
    cfg = Settings.from_overrides(duplicate_policy="error", keyword_merge=None, nope=1)
    assert cfg.duplicate_policy == "error"
    assert cfg.keyword_merge == Settings().keyword_merge


def test_invalid_duplicate_policy():
    with pytest.raises(ConfigError):
        Settings.from_overrides(duplicate_policy="last")


def test_settings_are_frozen():
    with pytest.raises(Exception):
        Settings().log_level = "DEBUG"  # type: ignore[misc]
