"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from contactbook.store import ContactStore


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep a developer's .env from leaking into tests."""
    monkeypatch.delenv("CONTACTBOOK_DB_PATH", raising=False)
    monkeypatch.delenv("CONTACTBOOK_FOREIGN_KEYS", raising=False)


@pytest.fixture
def store(tmp_path):
    """A contact store backed by a temporary database file."""
    s = ContactStore.open(path=tmp_path / "kontakte.db")
    yield s
    s.close()
