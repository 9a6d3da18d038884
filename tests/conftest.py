"""
Shared fixtures.

Router tests run against ``create_app(use_lifespan=False)`` with in-memory
manager doubles placed on ``app.state``, so no PostgreSQL is needed. The
doubles mimic the store: ids are generated, ``updated_at`` moves forward on
every update and an unknown ``department_id`` raises ``StoreError`` like a
foreign-key violation would.
"""

from datetime import datetime, timedelta
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from database.async_db import StoreError
from database.models.department import Department
from database.models.employee import Employee
from main import create_app

BASE_TIME = datetime(2024, 1, 1, 9, 0, 0)


class FakeClock:
    def __init__(self) -> None:
        self.now = BASE_TIME

    def tick(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


class FakeDepartmentManager:
    def __init__(self, departments: List[Department]) -> None:
        self.departments = departments
        self.fail = False

    async def list_departments(self) -> List[Department]:
        if self.fail:
            raise StoreError("query failed")
        return list(self.departments)


class FakeEmployeeManager:
    def __init__(self, departments: FakeDepartmentManager, clock: FakeClock) -> None:
        self._departments = departments
        self._clock = clock
        self.rows: Dict[int, Employee] = {}
        self._next_id = 1
        self.calls: List[str] = []
        self.fail = False

    def _check(self, op: str) -> None:
        self.calls.append(op)
        if self.fail:
            raise StoreError("query failed")

    def _check_fk(self, department_id: int) -> None:
        if department_id not in {d.id for d in self._departments.departments}:
            raise StoreError("query failed")

    def add(self, name: str, department_id: int) -> Employee:
        now = self._clock.tick()
        employee = Employee(
            id=self._next_id,
            name=name,
            department_id=department_id,
            created_at=now,
            updated_at=now,
        )
        self.rows[employee.id] = employee
        self._next_id += 1
        return employee

    async def list_employees(self) -> List[Employee]:
        self._check("list")
        return [self.rows[k] for k in sorted(self.rows)]

    async def create_employee(self, *, name: str, department_id: int) -> Employee:
        self._check("create")
        self._check_fk(department_id)
        return self.add(name, department_id)

    async def update_employee(
        self, employee_id: int, *, name: str, department_id: int
    ) -> Optional[Employee]:
        self._check("update")
        current = self.rows.get(employee_id)
        if current is None:
            return None
        self._check_fk(department_id)
        updated = Employee(
            id=current.id,
            name=name,
            department_id=department_id,
            created_at=current.created_at,
            updated_at=self._clock.tick(),
        )
        self.rows[employee_id] = updated
        return updated

    async def delete_employee(self, employee_id: int) -> bool:
        self._check("delete")
        return self.rows.pop(employee_id, None) is not None


class FakeDatabase:
    def __init__(self) -> None:
        self.fail = False

    async def fetchval(self, query: str, *args):
        if self.fail:
            raise StoreError("query failed")
        return 1


@pytest.fixture
def department_manager() -> FakeDepartmentManager:
    return FakeDepartmentManager(
        [
            Department(id=1, name="HTML"),
            Department(id=2, name="CSS"),
            Department(id=3, name="Javascript"),
        ]
    )


@pytest.fixture
def employee_manager(department_manager) -> FakeEmployeeManager:
    manager = FakeEmployeeManager(department_manager, FakeClock())
    manager.add("Employee 1", 1)
    manager.add("Employee 2", 2)
    manager.add("Employee 3", 3)
    manager.add("Employee 4", 3)
    return manager


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def app(department_manager, employee_manager, fake_db):
    app = create_app(use_lifespan=False)
    app.state.db = fake_db
    app.state.department_manager = department_manager
    app.state.employee_manager = employee_manager
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
