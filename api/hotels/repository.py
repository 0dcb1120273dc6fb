"""
Hotel persistence (raw SQL).

Every function issues exactly one statement against `hotels`.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

from core.db import Database

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS hotels (
    id SERIAL PRIMARY KEY,
    name VARCHAR(255) NOT NULL,
    price DECIMAL NOT NULL,
    doingtime TIMESTAMP DEFAULT CURRENT_TIMESTAMP
)
"""


async def ensure_table(db: Database) -> None:
    await db.execute(CREATE_TABLE_SQL)


async def insert_hotel(
    db: Database,
    *,
    name: str | None,
    price: Decimal | None,
    doingtime: datetime,
) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO hotels (name, price, doingtime)
        VALUES ($1, $2, $3)
        RETURNING id, name, price, doingtime
        """,
        name,
        price,
        doingtime,
    )
    if row is None:
        raise RuntimeError("Failed to insert hotel.")
    return row


async def list_hotels(db: Database) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, name, price, doingtime
        FROM hotels
        """
    )


async def get_hotels_by_id(db: Database, hotel_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, name, price, doingtime
        FROM hotels
        WHERE id = $1
        """,
        hotel_id,
    )


async def search_hotels_by_date(db: Database, day: str | None) -> list[dict[str, Any]]:
    # PostgreSQL parses the date; a malformed value fails the statement.
    return await db.fetch_all(
        """
        SELECT id, name, price, doingtime
        FROM hotels
        WHERE DATE(doingtime) = $1::text::date
        """,
        day,
    )


async def truncate_hotels(db: Database) -> None:
    await db.execute("TRUNCATE TABLE hotels RESTART IDENTITY")
