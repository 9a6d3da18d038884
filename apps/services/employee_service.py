from typing import List

from apps.core.errors import EmployeeNotFoundError
from database.managers.employee_manager import EmployeeManager
from database.models.employee import Employee


class EmployeeService:
    def __init__(self, employee_manager: EmployeeManager):
        self.employee_manager = employee_manager

    async def list_employees(self) -> List[Employee]:
        return await self.employee_manager.list_employees()

    async def create_employee(self, *, name: str, department_id: int) -> Employee:
        return await self.employee_manager.create_employee(
            name=name,
            department_id=department_id,
        )

    async def update_employee(
        self,
        employee_id: int,
        *,
        name: str,
        department_id: int,
    ) -> Employee:
        employee = await self.employee_manager.update_employee(
            employee_id,
            name=name,
            department_id=department_id,
        )
        if employee is None:
            raise EmployeeNotFoundError("Employee not found")
        return employee

    async def delete_employee(self, employee_id: int) -> None:
        deleted = await self.employee_manager.delete_employee(employee_id)
        if not deleted:
            raise EmployeeNotFoundError("Employee not found!")
