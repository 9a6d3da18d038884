"""
Схема БД и начальные данные.

Ничего отсюда не вызывается при старте API: таблицы создаются и
заполняются только командой ``python -m scripts.migrate``.
"""

from typing import Dict, List, Tuple

from database.async_db import AsyncDatabase
from utils.logger import get_logger

log = get_logger("[Schema]")

CREATE_TABLES_SQL = """
CREATE TABLE IF NOT EXISTS departments (
    id SERIAL PRIMARY KEY,
    name VARCHAR(100) NOT NULL
);
CREATE TABLE IF NOT EXISTS employees (
    id SERIAL PRIMARY KEY,
    name VARCHAR(100) NOT NULL,
    created_at TIMESTAMP DEFAULT now(),
    updated_at TIMESTAMP DEFAULT now(),
    department_id INTEGER REFERENCES departments(id) NOT NULL
);
"""

DROP_TABLES_SQL = """
DROP TABLE IF EXISTS employees;
DROP TABLE IF EXISTS departments;
"""

SEED_DEPARTMENTS: List[str] = ["HTML", "CSS", "Javascript"]

# (employee name, department name)
SEED_EMPLOYEES: List[Tuple[str, str]] = [
    ("Employee 1", "HTML"),
    ("Employee 2", "CSS"),
    ("Employee 3", "Javascript"),
    ("Employee 4", "Javascript"),
]


async def create_tables(db: AsyncDatabase) -> None:
    await db.execute_script(CREATE_TABLES_SQL)
    log.info("Таблицы созданы")


async def drop_tables(db: AsyncDatabase) -> None:
    await db.execute_script(DROP_TABLES_SQL)
    log.warning("Таблицы удалены")


async def seed(db: AsyncDatabase) -> bool:
    """
    Заполняет таблицы фиксированным набором данных.
    Если отделы уже есть, ничего не делает и возвращает False.
    """
    existing = await db.fetchval("SELECT COUNT(*) FROM departments")
    if existing:
        log.info(f"Начальные данные пропущены: в departments уже {existing} строк")
        return False

    dep_ids: Dict[str, int] = {}
    for name in SEED_DEPARTMENTS:
        dep_ids[name] = await db.fetchval(
            "INSERT INTO departments (name) VALUES ($1) RETURNING id", name
        )

    for name, dep_name in SEED_EMPLOYEES:
        await db.execute(
            "INSERT INTO employees (name, department_id) VALUES ($1, $2)",
            name,
            dep_ids[dep_name],
        )

    log.info(
        f"Начальные данные загружены: отделов {len(SEED_DEPARTMENTS)}, "
        f"сотрудников {len(SEED_EMPLOYEES)}"
    )
    return True
