from dataclasses import dataclass

import asyncpg


@dataclass
class Department:
    id: int
    name: str

    @classmethod
    def from_record(cls, record: asyncpg.Record) -> "Department":
        return cls(
            id=record["id"],
            name=record["name"],
        )
