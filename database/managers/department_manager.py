from typing import List

from database.async_db import AsyncDatabase
from database.managers.base import BaseManager
from database.models.department import Department


class DepartmentManager(BaseManager):
    def __init__(self, db: AsyncDatabase) -> None:
        super().__init__(db)

    # ------------------- departments -------------------
    async def list_departments(self) -> List[Department]:
        rows = await self.db.fetch("SELECT id, name FROM departments ORDER BY id")
        return [Department.from_record(r) for r in rows]
