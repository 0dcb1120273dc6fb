"""
Shared fixtures: an in-memory stand-in for the hotels repository and a
TestClient wired to it, so no PostgreSQL server is needed.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any

import pytest
from fastapi.testclient import TestClient

from core.db import StorageError, get_db
from hotels import repository
from main import app


class FakeHotelStore:
    def __init__(self) -> None:
        self.rows: list[dict[str, Any]] = []
        self.calls: list[str] = []
        self.fail_with: Exception | None = None
        self._next_id = 1

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    def add(self, name: str, price: str, doingtime: str) -> dict[str, Any]:
        row = {
            "id": self._next_id,
            "name": name,
            "price": Decimal(price),
            "doingtime": datetime.strptime(doingtime, "%Y-%m-%d %H:%M:%S"),
        }
        self._next_id += 1
        self.rows.append(row)
        return row

    async def insert_hotel(self, db, *, name, price, doingtime):
        self._record("insert_hotel")
        # Mirrors the table constraints: NOT NULL name/price, VARCHAR(255) name.
        for column, value in (("name", name), ("price", price)):
            if value is None:
                raise StorageError(
                    f'null value in column "{column}" of relation "hotels" violates not-null constraint'
                )
        if len(name) > 255:
            raise StorageError("value too long for type character varying(255)")
        row = {"id": self._next_id, "name": name, "price": price, "doingtime": doingtime}
        self._next_id += 1
        self.rows.append(row)
        return dict(row)

    async def list_hotels(self, db):
        self._record("list_hotels")
        return [dict(r) for r in self.rows]

    async def get_hotels_by_id(self, db, hotel_id):
        self._record("get_hotels_by_id")
        return [dict(r) for r in self.rows if r["id"] == hotel_id]

    async def search_hotels_by_date(self, db, day):
        self._record("search_hotels_by_date")
        if day is None:
            return []
        try:
            wanted = date.fromisoformat(day)
        except ValueError as exc:
            raise StorageError(f'invalid input syntax for type date: "{day}"') from exc
        return [dict(r) for r in self.rows if r["doingtime"].date() == wanted]


@pytest.fixture
def store(monkeypatch) -> FakeHotelStore:
    fake = FakeHotelStore()
    monkeypatch.setattr(repository, "insert_hotel", fake.insert_hotel)
    monkeypatch.setattr(repository, "list_hotels", fake.list_hotels)
    monkeypatch.setattr(repository, "get_hotels_by_id", fake.get_hotels_by_id)
    monkeypatch.setattr(repository, "search_hotels_by_date", fake.search_hotels_by_date)
    return fake


@pytest.fixture
def seeded_store(store) -> FakeHotelStore:
    store.add("Anataya Hotel", "2500", "2023-05-17 17:02:54")
    store.add("Mirana Beach Hotel", "7200", "2023-05-20 10:31:09")
    store.add("Huska Spirit Hotel", "3750", "2023-05-20 10:31:09")
    return store


@pytest.fixture
def client(store):
    app.dependency_overrides[get_db] = lambda: object()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
