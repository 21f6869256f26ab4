from fastapi import APIRouter
from .dashboard import router as dashboard_router

router = APIRouter(prefix="/reports")

router.include_router(dashboard_router)
