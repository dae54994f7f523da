# src/symbol_catalog/snapshot.py
"""
One-time build of the catalog snapshot and its publication.

A snapshot is immutable. Callers that arrive before the first build finishes
block on the same in-flight build; nobody ever sees a partial snapshot.
Rebuilding produces a new snapshot that replaces the old one in a single
reference assignment.
"""
from __future__ import annotations
import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Optional, Sequence, Tuple

from symbol_catalog.catalog import CategoryIndex, all_symbol_names, load_catalog
from symbol_catalog.config import Settings
from symbol_catalog.keywords import KEYWORD_TABLE, KeywordIndex, load_keyword_table
from symbol_catalog.search import SearchEngine
from symbol_catalog.taxonomy import DEFAULT_TAXONOMY, Taxonomy
from symbol_catalog.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogSnapshot:
    index: CategoryIndex
    keywords: KeywordIndex
    engine: SearchEngine
    built_at: datetime

    @property
    def taxonomy(self) -> Taxonomy:
        return self.index.taxonomy


def build_snapshot(
    identifiers: Optional[Iterable[str]] = None,
    keyword_pairs: Optional[Sequence[Tuple[str, Iterable[str]]]] = None,
    settings: Optional[Settings] = None,
    taxonomy: Taxonomy = DEFAULT_TAXONOMY,
) -> CatalogSnapshot:
    """
    Build catalog, category index, keyword index and engine from static inputs.

    identifiers default to the curated symbol list; keyword_pairs default to
    the file named by settings.keyword_table_path, else the built-in table.
    """
    cfg = settings or Settings()
    t0 = time.perf_counter()

    if identifiers is None:
        identifiers = all_symbol_names()
    if keyword_pairs is None:
        keyword_pairs = load_keyword_table(cfg.keyword_table_path) if cfg.keyword_table_path else KEYWORD_TABLE

    entries = load_catalog(identifiers, taxonomy=taxonomy, duplicate_policy=cfg.duplicate_policy)
    index = CategoryIndex.build(entries, taxonomy)
    keywords = KeywordIndex(keyword_pairs, merge=cfg.keyword_merge)

    snap = CatalogSnapshot(
        index=index,
        keywords=keywords,
        engine=SearchEngine(index, keywords),
        built_at=datetime.now(timezone.utc),
    )
    logger.info("Built catalog snapshot: %d entries, %d categories, %d keyword terms in %.1f ms",
                index.total, len(taxonomy.declared), len(keywords),
                (time.perf_counter() - t0) * 1000.0)
    return snap


class SnapshotHolder:
    """
    Owns the published snapshot. ``get()`` builds on first use; concurrent
    first callers wait on one shared Future. A failed build is not cached.
    """

    def __init__(self, builder=None, settings: Optional[Settings] = None):
        """
        Args:
            builder: callable returning a CatalogSnapshot; called with no
                arguments for the first build and with ``identifiers=`` by
                ``rebuild(identifiers)``
            settings: used by the default builder and for background_build
        """
        self._settings = settings or Settings()
        self._builder = builder or (
            lambda identifiers=None: build_snapshot(identifiers=identifiers, settings=self._settings)
        )
        self._lock = threading.Lock()
        self._snapshot: Optional[CatalogSnapshot] = None
        self._inflight: Optional[Future] = None
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def is_ready(self) -> bool:
        return self._snapshot is not None

    def _run_build(self, fut: Future) -> None:
        try:
            snap = self._builder()
        except BaseException as e:
            with self._lock:
                self._inflight = None
            logger.exception("Catalog snapshot build failed")
            fut.set_exception(e)
            return
        with self._lock:
            # a snapshot published by replace() while this build ran takes precedence
            if self._snapshot is None:
                self._snapshot = snap
            else:
                snap = self._snapshot
            self._inflight = None
        fut.set_result(snap)

    def _claim(self) -> Tuple[Future, bool]:
        """Return the in-flight future and whether this caller must run the build."""
        with self._lock:
            if self._inflight is not None:
                return self._inflight, False
            fut: Future = Future()
            if self._snapshot is not None:
                fut.set_result(self._snapshot)
                return fut, False
            self._inflight = fut
            return fut, True

    def start_background(self) -> Future:
        """Schedule the first build on a worker thread; returns the shared Future."""
        fut, owner = self._claim()
        if owner:
            with self._lock:
                if self._executor is None:
                    self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="symbol-catalog-build")
                executor = self._executor
            executor.submit(self._run_build, fut)
        return fut

    def get(self, timeout: Optional[float] = None) -> CatalogSnapshot:
        snap = self._snapshot
        if snap is not None:
            return snap
        if self._settings.background_build:
            return self.start_background().result(timeout)
        fut, owner = self._claim()
        if owner:
            self._run_build(fut)
        return fut.result(timeout)

    def replace(self, snapshot: CatalogSnapshot) -> CatalogSnapshot:
        """Publish a new snapshot; returns the previous one (or the new one if none)."""
        with self._lock:
            old = self._snapshot
            self._snapshot = snapshot
        logger.info("Published catalog snapshot built at %s", snapshot.built_at.isoformat())
        return old or snapshot

    def rebuild(self, identifiers: Optional[Iterable[str]] = None) -> CatalogSnapshot:
        """
        Build a fresh snapshot off to the side with the holder's builder, then
        swap it in. ``identifiers`` is forwarded to the builder.
        """
        if identifiers is None:
            snap = self._builder()
        else:
            snap = self._builder(identifiers=list(identifiers))
        self.replace(snap)
        return snap

    def shutdown(self) -> None:
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)


_default_holder = SnapshotHolder()


def configure(settings: Optional[Settings] = None) -> SnapshotHolder:
    """
    Set up package logging and install a fresh default holder for these settings.
    Starts the build on a worker thread when settings.background_build is set.
    """
    global _default_holder
    cfg = settings or Settings()
    setup_logging(cfg.log_level)
    logger.debug("Catalog settings: %s", cfg.to_dict())
    holder = SnapshotHolder(settings=cfg)
    if cfg.background_build:
        holder.start_background()
    previous, _default_holder = _default_holder, holder
    previous.shutdown()
    return holder


def default_holder() -> SnapshotHolder:
    return _default_holder


def get_snapshot(timeout: Optional[float] = None) -> CatalogSnapshot:
    return _default_holder.get(timeout)


def get_engine(timeout: Optional[float] = None) -> SearchEngine:
    return _default_holder.get(timeout).engine
