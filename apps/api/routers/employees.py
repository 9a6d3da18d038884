from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from apps.api.deps import get_employee_service
from apps.api.schemas.employees import INT4_MAX, EmployeeResponse, EmployeeWriteRequest
from apps.services.employee_service import EmployeeService


router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=List[EmployeeResponse])
async def list_employees(service: EmployeeService = Depends(get_employee_service)):
    return await service.list_employees()


@router.post("", response_model=EmployeeResponse)
async def create_employee(
    payload: EmployeeWriteRequest,
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.create_employee(
        name=payload.name,
        department_id=payload.department_id,
    )


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    payload: EmployeeWriteRequest,
    employee_id: int = Path(..., le=INT4_MAX),
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.update_employee(
        employee_id,
        name=payload.name,
        department_id=payload.department_id,
    )


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: int = Path(..., le=INT4_MAX),
    service: EmployeeService = Depends(get_employee_service),
):
    await service.delete_employee(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
