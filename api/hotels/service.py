"""
Hotel business logic.

Scope:
- create / list / search over the `hotels` table (repository)
- dashboard summary computed in memory over all rows
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Any

from core.db import Database

from . import repository, schemas

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
_HOTEL_ID_RE = re.compile(r"[+-]?[0-9]+")

logger = logging.getLogger(__name__)


class InvalidHotelIdError(ValueError):
    pass


def now_timestamp() -> datetime:
    """
    Local wall-clock time at `YYYY-MM-DD HH:MM:SS` precision.
    """
    return datetime.now().replace(microsecond=0)


def parse_hotel_id(raw: str) -> int:
    value = (raw or "").strip()
    if not _HOTEL_ID_RE.fullmatch(value):
        raise InvalidHotelIdError("Invalid ID format - must be a number")
    return int(value)


async def ensure_schema(db: Database) -> None:
    await repository.ensure_table(db)
    logger.info("hotels_table_ready")


async def create_hotel(db: Database, payload: schemas.CreateHotelRequest) -> list[dict[str, Any]]:
    row = await repository.insert_hotel(
        db,
        name=payload.name,
        price=payload.price,
        doingtime=now_timestamp(),
    )
    logger.info("hotel_created id=%s", row["id"])
    return [row]


async def list_hotels(db: Database, raw_id: str | None = None) -> list[dict[str, Any]]:
    if raw_id is None:
        return await repository.list_hotels(db)
    # Parse before touching storage so a bad id never reaches the database.
    hotel_id = parse_hotel_id(raw_id)
    return await repository.get_hotels_by_id(db, hotel_id)


async def search_hotels(db: Database, payload: schemas.SearchHotelRequest) -> list[dict[str, Any]]:
    return await repository.search_hotels_by_date(db, payload.date)


def summarize(hotels: list[dict[str, Any]]) -> dict[str, Any]:
    """
    Count, price extremes and latest `doingtime` in one pass.

    Each extreme is replaced only on a strict comparison, so the earliest
    row wins ties. An empty list yields a zeroed summary.
    """
    if not hotels:
        return {
            "AllHotel": 0,
            "Price": {"High": None, "Low": None},
            "LastHotelAdd": None,
        }

    highest = lowest = latest = hotels[0]
    for hotel in hotels[1:]:
        if hotel["price"] > highest["price"]:
            highest = hotel
        if hotel["price"] < lowest["price"]:
            lowest = hotel
        if hotel["doingtime"] is not None and (
            latest["doingtime"] is None or hotel["doingtime"] > latest["doingtime"]
        ):
            latest = hotel

    return {
        "AllHotel": len(hotels),
        "Price": {"High": highest["name"], "Low": lowest["name"]},
        "LastHotelAdd": latest["doingtime"],
    }


async def dashboard(db: Database) -> dict[str, Any]:
    hotels = await repository.list_hotels(db)
    return {"Data": hotels, "Dashboard": summarize(hotels)}
