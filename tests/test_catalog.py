import logging

import pytest

from symbol_catalog.catalog import CategoryIndex, Entry, all_symbol_names, dedupe_identifiers, load_catalog
from symbol_catalog.errors import DuplicateSymbolError
from symbol_catalog.taxonomy import CATCH_ALL_CID, DEFAULT_TAXONOMY, classify


def test_loader_sorts_by_ordinal_name():
    entries = load_catalog(["b", "a.fill", "a", "B", "a.circle"])
    assert [e.name for e in entries] == ["B", "a", "a.circle", "a.fill", "b"]


def test_loader_first_occurrence_wins(caplog):
    raw = all_symbol_names()
    assert len(raw) != len(set(raw))  # the curated source carries repeats
    with caplog.at_level(logging.WARNING, logger="symbol_catalog.catalog.loader"):
        entries = load_catalog(raw)
    assert "pencil.circle" in caplog.text
    names = [e.name for e in entries]
    assert len(names) == len(set(names)) == len(set(raw))
    assert "pencil.circle" in names


def test_dedupe_reports_repeats():
    unique, dupes = dedupe_identifiers(["x", "y", "x", "z", "y"])
    assert unique == ["x", "y", "z"]
    assert dupes == ["x", "y"]


def test_loader_error_policy_raises():
    with pytest.raises(DuplicateSymbolError) as exc:
        load_catalog(["lock", "lock.fill", "lock"], duplicate_policy="error")
    assert exc.value.names == ["lock"]


def test_empty_input_gives_empty_queryable_index():
    idx = CategoryIndex.build(load_catalog([]))
    assert idx.total == 0
    assert idx.bucket(None) == ()
    assert idx.count("health") == 0
    assert idx.get("heart") is None
    assert all(v == 0 for v in idx.counts().values())


def test_entries_are_immutable():
    e = Entry("heart", "human")
    with pytest.raises(Exception):
        e.name = "other"  # type: ignore[misc]


def test_buckets_partition_catalog(index):
    declared = [c.cid for c in DEFAULT_TAXONOMY.declared]
    seen = set()
    total = 0
    for cid in declared:
        names = {e.name for e in index.bucket(cid)}
        assert not (names & seen), f"{cid} overlaps another bucket"
        seen |= names
        total += len(names)
    unclassified = [e for e in index.entries if e.category == CATCH_ALL_CID]
    # declared buckets plus the unmatched remainder cover the catalog exactly once
    assert total + len(unclassified) == index.total
    assert index.bucket(CATCH_ALL_CID) == index.entries
    assert index.count(CATCH_ALL_CID) == index.total


def test_bucket_members_match_first_category(index):
    for cid in (c.cid for c in DEFAULT_TAXONOMY.declared):
        for e in index.bucket(cid):
            assert classify(e.name).cid == cid


def test_round_trip_every_entry_is_in_its_bucket(index):
    for e in index.entries:
        assert e in index.bucket(classify(e.name).cid)


def test_buckets_keep_catalog_order(index):
    for cid in DEFAULT_TAXONOMY.ordered_cids:
        names = [e.name for e in index.bucket(cid)]
        assert names == sorted(names)


def test_lookup_and_counts(index):
    assert index.get("heart.fill") == Entry("heart.fill", "human")
    assert index.get("nonexistent.symbol.name") is None
    assert "wifi" in index
    counts = index.counts()
    assert list(counts) == DEFAULT_TAXONOMY.ordered_cids
    assert counts[CATCH_ALL_CID] == index.total
    assert index.bucket("unknown_cid") == ()


def test_declared_bucket_sizes_sum_to_total_when_everything_classifies():
    idx = CategoryIndex.build(load_catalog(["heart", "wifi", "star", "circle", "cart.fill", "arrow.up"]))
    declared = [c.cid for c in DEFAULT_TAXONOMY.declared]
    assert sum(idx.count(cid) for cid in declared) == idx.total == 6


def test_symbols_module_exposes_only_flat_listing():
    from symbol_catalog.catalog import symbols

    assert symbols.__all__ == ["SYMBOL_GROUPS", "all_symbol_names"]
    assert not hasattr(symbols, "symbol_groups")
