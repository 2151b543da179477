"""Pytest configuration and shared fixtures.

Organization:
    - Settings Fixtures: isolate tests from PAGINATION_/LOG_ environment
    - Node Fixtures: small ordered datasets with identifier cursors
"""

from __future__ import annotations

import os

import pytest

from graph_pagination.core.settings.loader import clear_all_caches
from tests.utils import Node, make_nodes


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop pagination/logging env vars and reset cached settings around each test."""
    for name in list(os.environ):
        if name.startswith(("PAGINATION_", "LOG_")):
            monkeypatch.delenv(name, raising=False)
    clear_all_caches()
    yield
    clear_all_caches()


# ============================================================================
# Node Fixtures
# ============================================================================


@pytest.fixture
def abcd() -> list[Node]:
    """Four nodes a..d."""
    return make_nodes("abcd")


@pytest.fixture
def abcde() -> list[Node]:
    """Five nodes a..e."""
    return make_nodes("abcde")
