from dataclasses import dataclass
from datetime import datetime

import asyncpg


@dataclass
class Employee:
    id: int
    name: str
    department_id: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: asyncpg.Record) -> "Employee":
        return cls(
            id=record["id"],
            name=record["name"],
            department_id=record["department_id"],
            created_at=record["created_at"],
            updated_at=record["updated_at"],
        )
