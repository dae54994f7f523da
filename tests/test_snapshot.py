import io
import logging
import threading
import time

import pytest

from symbol_catalog import snapshot as snapshot_mod
from symbol_catalog.config import Settings
from symbol_catalog.errors import DuplicateSymbolError
from symbol_catalog.snapshot import SnapshotHolder, build_snapshot


def test_build_snapshot_defaults(snapshot):
    assert snapshot.index.total > 100
    assert len(snapshot.keywords) >= 150
    assert snapshot.engine.index is snapshot.index
    assert snapshot.taxonomy.version == "v1"


def test_build_snapshot_from_keyword_file(tmp_path):
    p = tmp_path / "kw.yaml"
    p.write_text("ping: [wifi]\n", encoding="utf-8")
    snap = build_snapshot(identifiers=["wifi", "heart"], settings=Settings.from_overrides(keyword_table_path=str(p)))
    assert snap.keywords.all_keywords() == ["ping"]
    assert [e.name for e in snap.engine.search_with_semantics("ping")] == ["wifi"]


def test_build_snapshot_error_policy():
    with pytest.raises(DuplicateSymbolError):
        build_snapshot(settings=Settings.from_overrides(duplicate_policy="error"))


def test_degenerate_inputs_build_empty_snapshot():
    snap = build_snapshot(identifiers=[], keyword_pairs=[])
    assert snap.index.total == 0
    assert snap.engine.search_with_semantics("add") == []


def test_concurrent_first_callers_share_one_build():
    calls = []
    gate = threading.Event()

    def slow_builder():
        calls.append(1)
        gate.wait(5)
        return build_snapshot(identifiers=["heart", "wifi"], keyword_pairs=[])

    holder = SnapshotHolder(builder=slow_builder)
    assert not holder.is_ready
    results = []
    threads = [threading.Thread(target=lambda: results.append(holder.get(timeout=10))) for _ in range(8)]
    for t in threads:
        t.start()
    time.sleep(0.1)
    gate.set()
    for t in threads:
        t.join(10)

    assert len(calls) == 1
    assert len(results) == 8
    assert all(r is results[0] for r in results)
    assert holder.is_ready


def test_background_build_and_blocking_get():
    holder = SnapshotHolder(builder=lambda: build_snapshot(identifiers=["star"], keyword_pairs=[]))
    fut = holder.start_background()
    snap = holder.get(timeout=10)
    assert fut.result(10) is snap
    assert holder.start_background().result(1) is snap
    holder.shutdown()


def test_failed_build_is_not_cached():
    attempts = []

    def flaky():
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("asset source unavailable")
        return build_snapshot(identifiers=["bolt"], keyword_pairs=[])

    holder = SnapshotHolder(builder=flaky)
    with pytest.raises(RuntimeError):
        holder.get()
    assert not holder.is_ready
    assert holder.get().index.get("bolt") is not None
    assert len(attempts) == 2


def test_rebuild_swaps_whole_snapshot():
    holder = SnapshotHolder(
        builder=lambda identifiers=None: build_snapshot(identifiers=identifiers or ["heart"], keyword_pairs=[])
    )
    old = holder.get()
    engine_before = old.engine
    new = holder.rebuild(identifiers=["heart", "wifi"])
    assert holder.get() is new
    assert new is not old
    # readers holding the old snapshot keep a consistent view
    assert engine_before.search("wifi") == []
    assert [e.name for e in holder.get().engine.search("wifi")] == ["wifi"]


def test_replace_returns_previous():
    holder = SnapshotHolder(builder=lambda: build_snapshot(identifiers=["a"], keyword_pairs=[]))
    first = holder.get()
    second = build_snapshot(identifiers=["b"], keyword_pairs=[])
    assert holder.replace(second) is first
    assert holder.get() is second


def test_configure_installs_default_holder():
    previous = snapshot_mod.default_holder()
    try:
        holder = snapshot_mod.configure(Settings.from_overrides(log_level="WARNING"))
        assert snapshot_mod.default_holder() is holder
        assert snapshot_mod.get_engine().contains("heart")
        assert snapshot_mod.get_snapshot() is holder.get()
    finally:
        snapshot_mod._default_holder = previous


def test_rebuild_with_identifiers_keeps_holder_builder():
    pairs = [("ping", ["wifi"])]
    holder = SnapshotHolder(
        builder=lambda identifiers=None: build_snapshot(identifiers=identifiers or ["heart"], keyword_pairs=pairs)
    )
    holder.get()
    snap = holder.rebuild(identifiers=["wifi", "star"])
    assert snap.keywords.all_keywords() == ["ping"]
    assert [e.name for e in snap.engine.search_with_semantics("ping")] == ["wifi"]


def test_waiters_receive_snapshot_published_during_build():
    gate = threading.Event()
    started = threading.Event()

    def gated_builder():
        started.set()
        gate.wait(5)
        return build_snapshot(identifiers=["old"], keyword_pairs=[])

    holder = SnapshotHolder(builder=gated_builder)
    got = []
    waiter = threading.Thread(target=lambda: got.append(holder.get(timeout=10)))
    waiter.start()
    assert started.wait(5)

    published = build_snapshot(identifiers=["new"], keyword_pairs=[])
    holder.replace(published)
    gate.set()
    waiter.join(10)

    assert got == [published]
    assert holder.get() is published
    assert got[0].index.get("new") is not None


def test_configure_leaves_host_logging_alone():
    root = logging.getLogger()
    host_handler = logging.StreamHandler(io.StringIO())
    root.addHandler(host_handler)
    previous = snapshot_mod.default_holder()
    try:
        snapshot_mod.configure(Settings.from_overrides(log_level="WARNING"))
        assert host_handler in root.handlers
        pkg = logging.getLogger("symbol_catalog")
        assert pkg.level == logging.WARNING
        # the host already logs, so no extra package handler is stacked on top
        assert pkg.handlers == []
    finally:
        root.removeHandler(host_handler)
        logging.getLogger("symbol_catalog").setLevel(logging.NOTSET)
        snapshot_mod._default_holder = previous


def test_configure_shuts_down_previous_holder():
    previous = snapshot_mod.default_holder()
    try:
        first = snapshot_mod.configure(Settings.from_overrides(background_build=True))
        first.get(timeout=10)
        assert first._executor is not None
        snapshot_mod.configure(Settings.from_overrides(background_build=False))
        assert first._executor is None
    finally:
        snapshot_mod._default_holder = previous
