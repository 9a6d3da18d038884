from typing import Any, List, Optional

import asyncpg

from utils.logger import get_logger

log = get_logger("[DB]")


class StoreError(Exception):
    """Любая ошибка хранилища: соединение, ограничения, кривой SQL."""


# ошибки драйвера, которые превращаются в StoreError
_DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


def rows_affected(status: str) -> int:
    """
    Количество затронутых строк из статуса команды:
    'DELETE 1' -> 1, 'UPDATE 0' -> 0, 'INSERT 0 3' -> 3
    """
    if not status:
        return 0
    tail = status.rsplit(" ", 1)[-1]
    return int(tail) if tail.isdigit() else 0


class AsyncDatabase:
    def __init__(
        self,
        dsn: str,
        min_size: int = 1,
        max_size: int = 10,
    ) -> None:
        self.dsn = dsn
        self.min_size = min_size
        self.max_size = max_size
        self._pool: Optional[asyncpg.Pool] = None

    async def connect(self) -> None:
        if self._pool is not None:
            return
        try:
            self._pool = await asyncpg.create_pool(
                dsn=self.dsn,
                min_size=self.min_size,
                max_size=self.max_size,
            )
        except _DRIVER_ERRORS as exc:
            log.error(f"Не удалось подключиться к БД: {exc}")
            raise StoreError("connection failed") from exc

    async def close(self) -> None:
        if self._pool is None:
            return
        await self._pool.close()
        self._pool = None

    @property
    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise StoreError("database is not connected")
        return self._pool

    async def fetch(self, query: str, *args: Any) -> List[asyncpg.Record]:
        try:
            return await self.pool.fetch(query, *args)
        except _DRIVER_ERRORS as exc:
            log.error(f"Ошибка fetch: {exc!r}")
            raise StoreError("query failed") from exc

    async def fetchrow(self, query: str, *args: Any) -> Optional[asyncpg.Record]:
        try:
            return await self.pool.fetchrow(query, *args)
        except _DRIVER_ERRORS as exc:
            log.error(f"Ошибка fetchrow: {exc!r}")
            raise StoreError("query failed") from exc

    async def fetchval(self, query: str, *args: Any) -> Any:
        try:
            return await self.pool.fetchval(query, *args)
        except _DRIVER_ERRORS as exc:
            log.error(f"Ошибка fetchval: {exc!r}")
            raise StoreError("query failed") from exc

    async def execute(self, query: str, *args: Any) -> str:
        try:
            return await self.pool.execute(query, *args)
        except _DRIVER_ERRORS as exc:
            log.error(f"Ошибка execute: {exc!r}")
            raise StoreError("query failed") from exc

    async def execute_script(self, sql: str) -> None:
        # без аргументов asyncpg выполняет скрипт через simple query protocol
        try:
            await self.pool.execute(sql)
        except _DRIVER_ERRORS as exc:
            log.error(f"Ошибка выполнения скрипта: {exc!r}")
            raise StoreError("script failed") from exc
