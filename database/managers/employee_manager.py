from typing import List, Optional

from database.async_db import AsyncDatabase, rows_affected
from database.managers.base import BaseManager
from database.models.employee import Employee


class EmployeeManager(BaseManager):
    def __init__(self, db: AsyncDatabase) -> None:
        super().__init__(db)

    # ------------------- employees -------------------
    async def list_employees(self) -> List[Employee]:
        rows = await self.db.fetch(
            """
            SELECT id, name, department_id, created_at, updated_at
            FROM employees
            ORDER BY id
        """
        )
        return [Employee.from_record(r) for r in rows]

    async def create_employee(self, *, name: str, department_id: int) -> Employee:
        query = """
        INSERT INTO employees (name, department_id)
        VALUES ($1, $2)
        RETURNING *
        """
        row = await self.db.fetchrow(query, name, department_id)
        if row is None:
            raise RuntimeError("Failed to insert employee")
        return Employee.from_record(row)

    async def update_employee(
        self,
        employee_id: int,
        *,
        name: str,
        department_id: int,
    ) -> Optional[Employee]:
        # updated_at считает БД, created_at не трогаем
        query = """
        UPDATE employees
        SET name = $1, department_id = $2, updated_at = now()
        WHERE id = $3
        RETURNING *
        """
        row = await self.db.fetchrow(query, name, department_id, employee_id)
        return Employee.from_record(row) if row else None

    async def delete_employee(self, employee_id: int) -> bool:
        status = await self.db.execute(
            "DELETE FROM employees WHERE id = $1", employee_id
        )
        return rows_affected(status) > 0
