from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from utils.logger import setup_logging, get_logger
from utils.config import (
    API_TITLE, API_VERSION, CORS_ORIGINS,
    DATABASE_URL, DB_MIN_POOL_SIZE, DB_MAX_POOL_SIZE,
    HOST, PORT, LOG_LEVEL, LOG_TO_FILE,
)

from database.async_db import AsyncDatabase
from database.managers.department_manager import DepartmentManager
from database.managers.employee_manager import EmployeeManager

from apps.api.routers import router as api_router
from apps.core.errors import register_exception_handlers
from apps.core.middleware import add_request_logging

setup_logging(level=LOG_LEVEL, log_to_file=LOG_TO_FILE)
log = get_logger("[API]")


def attach_database(app: FastAPI, db: AsyncDatabase) -> None:
    app.state.db = db
    app.state.department_manager = DepartmentManager(db)
    app.state.employee_manager = EmployeeManager(db)


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("Подключаемся к БД...")
    db = AsyncDatabase(
        dsn=DATABASE_URL,
        min_size=DB_MIN_POOL_SIZE,
        max_size=DB_MAX_POOL_SIZE,
    )
    await db.connect()
    log.info("БД подключена [✓]")

    attach_database(app, db)

    try:
        yield
    finally:
        await db.close()
        log.info("Соединение с БД закрыто [✓]")


def create_app(use_lifespan: bool = True) -> FastAPI:
    """
    Собирает приложение. Тесты вызывают create_app(use_lifespan=False)
    и сами кладут менеджеры в app.state.
    """
    app = FastAPI(
        title=API_TITLE,
        version=API_VERSION,
        lifespan=lifespan if use_lifespan else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    add_request_logging(app)
    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")
    return app


app = create_app()


if __name__ == "__main__":
    log.info(f"Слушаем порт {PORT}")
    uvicorn.run(app, host=HOST, port=PORT)
