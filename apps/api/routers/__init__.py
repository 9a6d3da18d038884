from fastapi import APIRouter

from .health import router as health_router
from .departments import router as departments_router
from .employees import router as employees_router

router = APIRouter()
router.include_router(health_router)
router.include_router(departments_router)
router.include_router(employees_router)
