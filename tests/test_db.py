from __future__ import annotations

import os
import sqlite3

import pytest

from foodie_finds_api.app.core import db
from foodie_finds_api.app.core.config import settings
from foodie_finds_api.app.core.errors import StoreUnavailableError
from tests.conftest import build_store


@pytest.fixture
def store(tmp_path):
    path = build_store(tmp_path / "store.sqlite")
    db.close_store()
    yield path
    db.close_store()


def test_fetch_all_requires_open_store(store):
    with pytest.raises(StoreUnavailableError):
        db.fetch_all("SELECT * FROM dishes")


def test_fetch_all_returns_dicts(store):
    db.open_store(store)
    rows = db.fetch_all("SELECT * FROM dishes WHERE id = ?", (2,))
    assert rows == [{"id": 2, "name": "Chicken Tikka", "price": 12.0, "isVeg": 0}]
    assert type(rows[0]) is dict


def test_open_store_reuses_handle(store):
    first = db.open_store(store)
    assert db.open_store(store) is first
    assert db.get_connection() is first


def test_store_is_read_only(store):
    db.open_store(store)
    with pytest.raises(sqlite3.OperationalError):
        db.get_connection().execute("DELETE FROM dishes")


def test_open_store_missing_file(tmp_path):
    db.close_store()
    with pytest.raises(sqlite3.OperationalError):
        db.open_store(str(tmp_path / "missing.sqlite"))


def test_relative_database_path_resolves_to_project_root(monkeypatch):
    monkeypatch.setattr(settings, "database_url", "FoodieFinds/database.sqlite")
    path = db.get_database_path()
    assert os.path.isabs(path)
    assert path.endswith(os.path.join("FoodieFinds", "database.sqlite"))


def test_absolute_database_path_is_kept(monkeypatch, tmp_path):
    target = str(tmp_path / "x.sqlite")
    monkeypatch.setattr(settings, "database_url", target)
    assert db.get_database_path() == target
