from fastapi import Depends, Request

from apps.services.employee_service import EmployeeService
from database.async_db import AsyncDatabase
from database.managers.department_manager import DepartmentManager
from database.managers.employee_manager import EmployeeManager


def get_db(request: Request) -> AsyncDatabase:
    return request.app.state.db


def get_department_manager(request: Request) -> DepartmentManager:
    return request.app.state.department_manager


def get_employee_manager(request: Request) -> EmployeeManager:
    return request.app.state.employee_manager


def get_employee_service(
    employee_manager: EmployeeManager = Depends(get_employee_manager),
) -> EmployeeService:
    return EmployeeService(employee_manager)
