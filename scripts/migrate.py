#!/usr/bin/env python3
"""
Create the HR directory tables and optionally seed them.

Usage:
    python -m scripts.migrate                    # CREATE TABLE IF NOT EXISTS
    python -m scripts.migrate --seed             # + demo data, only into empty tables
    python -m scripts.migrate --reset --yes --seed

--reset drops both tables first and destroys all data. It is refused unless
--yes is passed or ALLOW_DESTRUCTIVE_RESET=true is set.
"""

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from database.async_db import AsyncDatabase, StoreError
from database.schema import create_tables, drop_tables, seed
from utils.config import ALLOW_DESTRUCTIVE_RESET, DATABASE_URL, LOG_LEVEL
from utils.logger import get_logger, setup_logging

log = get_logger("[MigrateScript]")


async def run_migrations(
    db: AsyncDatabase,
    *,
    reset: bool = False,
    seed_data: bool = False,
) -> None:
    if reset:
        await drop_tables(db)
    await create_tables(db)
    if seed_data:
        await seed(db)


async def _run(dsn: str, reset: bool, seed_data: bool) -> None:
    db = AsyncDatabase(dsn=dsn, min_size=1, max_size=1)
    await db.connect()
    try:
        await run_migrations(db, reset=reset, seed_data=seed_data)
    finally:
        await db.close()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Create (and optionally seed) the HR directory schema.")
    ap.add_argument("--database-url", default=DATABASE_URL, help="asyncpg DSN (default: $DATABASE_URL)")
    ap.add_argument("--seed", action="store_true", help="Insert demo departments and employees into empty tables")
    ap.add_argument("--reset", action="store_true", help="DROP both tables before creating them (destroys data)")
    ap.add_argument("--yes", action="store_true", help="Confirm --reset")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(LOG_LEVEL)

    if args.reset and not (args.yes or ALLOW_DESTRUCTIVE_RESET):
        log.error("--reset удаляет все данные: передайте --yes или задайте ALLOW_DESTRUCTIVE_RESET=true")
        return 1

    try:
        asyncio.run(_run(args.database_url, args.reset, args.seed))
    except StoreError as e:
        log.error(f"Миграция не выполнена: {e}")
        return 1

    log.info("Миграция завершена")
    return 0


if __name__ == "__main__":
    sys.exit(main())
