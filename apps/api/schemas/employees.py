from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

# верхняя граница INTEGER в PostgreSQL
INT4_MAX = 2_147_483_647


class EmployeeWriteRequest(BaseModel):
    """Тело POST /employees и PUT /employees/{id}."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: StrictStr = Field(..., min_length=1, max_length=100)
    department_id: StrictInt = Field(..., ge=1, le=INT4_MAX)


class EmployeeResponse(BaseModel):
    id: int
    name: str
    department_id: int
    created_at: datetime
    updated_at: datetime
