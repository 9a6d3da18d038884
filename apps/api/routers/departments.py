from typing import List

from fastapi import APIRouter, Depends

from apps.api.deps import get_department_manager
from apps.api.schemas.departments import DepartmentResponse
from database.managers.department_manager import DepartmentManager


router = APIRouter(prefix="/departments", tags=["departments"])


@router.get("", response_model=List[DepartmentResponse])
async def list_departments(manager: DepartmentManager = Depends(get_department_manager)):
    return await manager.list_departments()
