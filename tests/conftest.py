from __future__ import annotations

import sqlite3

import pytest
from fastapi.testclient import TestClient

from foodie_finds_api.app.core import db
from foodie_finds_api.app.core.config import settings
from foodie_finds_api.app.main import create_app

RESTAURANTS = [
    (1, "Pasta Place", "Italian", "false", "true", "false", 4.5),
    (2, "Spice Route", "Indian", "true", "true", "false", 4.7),
    (3, "Green Garden", "Indian", "true", "false", "false", 3.9),
    (4, "Sushi Bay", "Japanese", "false", "false", "true", 4.2),
    (5, "Bangkok Bites", "Thai", "false", "true", "true", 4.0),
]

DISHES = [
    (1, "Margherita Pizza", 10.5, 1),
    (2, "Chicken Tikka", 12.0, 0),
    (3, "Paneer Butter Masala", 11.25, 1),
    (4, "Salmon Nigiri", 15.0, 0),
    (5, "Garlic Bread", 4.0, 1),
]


def build_store(path, restaurants=RESTAURANTS, dishes=DISHES, with_tables=True):
    conn = sqlite3.connect(path)
    try:
        if with_tables:
            conn.execute(
                """
                CREATE TABLE restaurants (
                    id INTEGER PRIMARY KEY,
                    name TEXT,
                    cuisine TEXT,
                    isVeg TEXT,
                    hasOutdoorSeating TEXT,
                    isLuxury TEXT,
                    rating REAL
                )
                """
            )
            conn.execute(
                """
                CREATE TABLE dishes (
                    id INTEGER PRIMARY KEY,
                    name TEXT,
                    price REAL,
                    isVeg INTEGER
                )
                """
            )
            conn.executemany("INSERT INTO restaurants VALUES (?, ?, ?, ?, ?, ?, ?)", restaurants)
            conn.executemany("INSERT INTO dishes VALUES (?, ?, ?, ?)", dishes)
        else:
            conn.execute("CREATE TABLE unrelated (id INTEGER)")
        conn.commit()
    finally:
        conn.close()
    return str(path)


@pytest.fixture
def make_client(tmp_path, monkeypatch):
    """Return a factory building a client over a freshly seeded store."""
    clients = []

    def _make(**store_kwargs):
        path = build_store(tmp_path / f"store{len(clients)}.sqlite", **store_kwargs)
        monkeypatch.setattr(settings, "database_url", path)
        db.close_store()
        client = TestClient(create_app())
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
    db.close_store()


@pytest.fixture
def client(make_client):
    return make_client()
