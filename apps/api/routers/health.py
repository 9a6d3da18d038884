from fastapi import APIRouter, Depends

from apps.api.deps import get_db
from database.async_db import AsyncDatabase
from utils.config import API_VERSION

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/ping")
async def ping(db: AsyncDatabase = Depends(get_db)):
    await db.fetchval("SELECT 1")
    return {"status": "ok", "version": API_VERSION, "database": "ok"}
