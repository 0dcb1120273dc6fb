"""
One-shot demo bootstrap: create the database and `hotels` table if absent,
then replace its contents with three sample rows.

Run before starting the service:
    python api/seed.py
"""

from __future__ import annotations

import asyncio
import logging
import sys
from datetime import datetime
from decimal import Decimal
from urllib.parse import urlsplit, urlunsplit

import asyncpg
from dotenv import load_dotenv

from core import db, settings
from hotels import repository
from hotels.service import TIMESTAMP_FORMAT

logger = logging.getLogger(__name__)

SEED_HOTELS = [
    {"name": "Anataya Hotel", "price": Decimal("2500"), "doingtime": "2023-05-17 17:02:54"},
    {"name": "Mirana Beach Hotel", "price": Decimal("7200"), "doingtime": "2023-05-20 10:31:09"},
    {"name": "Huska Spirit Hotel", "price": Decimal("3750"), "doingtime": "2023-05-20 10:31:09"},
]


def maintenance_target(url: str) -> tuple[str, str]:
    """
    Split a DSN into (DSN of the `postgres` database, target database name).
    """
    parts = urlsplit(url)
    name = parts.path.lstrip("/") or settings.db_name()
    admin_url = urlunsplit((parts.scheme, parts.netloc, "/postgres", parts.query, parts.fragment))
    return admin_url, name


def quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


async def create_database(admin_url: str, name: str) -> None:
    conn = await asyncpg.connect(dsn=admin_url)
    try:
        exists = await conn.fetchval("SELECT 1 FROM pg_database WHERE datname = $1", name)
        if exists:
            logger.info("database_exists name=%s", name)
            return None
        # CREATE DATABASE takes no bind parameters.
        await conn.execute(f"CREATE DATABASE {quote_identifier(name)}")
        logger.info("database_created name=%s", name)
    finally:
        await conn.close()


async def seed_hotels(database: db.Database) -> int:
    await repository.ensure_table(database)
    logger.info("hotels_table_ready")
    await repository.truncate_hotels(database)
    for hotel in SEED_HOTELS:
        await repository.insert_hotel(
            database,
            name=hotel["name"],
            price=hotel["price"],
            doingtime=datetime.strptime(hotel["doingtime"], TIMESTAMP_FORMAT),
        )
    logger.info("hotels_seeded count=%s", len(SEED_HOTELS))
    return len(SEED_HOTELS)


async def seed() -> None:
    dsn = db.database_url()
    await create_database(*maintenance_target(dsn))

    database = db.Database(dsn, min_size=1, max_size=1)
    await database.connect()
    try:
        await seed_hotels(database)
    finally:
        await database.close()


def main() -> int:
    load_dotenv()
    logging.basicConfig(level=settings.log_level())
    try:
        asyncio.run(seed())
    except Exception:
        logger.exception("seed_failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
