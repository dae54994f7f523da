# Ensure `src/` is on sys.path so tests can import `symbol_catalog` without requiring editable install
import os
import sys

import pytest

HERE = os.path.dirname(__file__)
SRC = os.path.abspath(os.path.join(HERE, "..", "src"))
if os.path.isdir(SRC) and SRC not in sys.path:
    sys.path.insert(0, SRC)


@pytest.fixture(scope="session")
def snapshot():
    from symbol_catalog.snapshot import build_snapshot
    return build_snapshot()


@pytest.fixture(scope="session")
def engine(snapshot):
    return snapshot.engine


@pytest.fixture(scope="session")
def index(snapshot):
    return snapshot.index
