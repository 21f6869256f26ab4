from fastapi import APIRouter

from .products import router as products_router
from .stock import router as stock_router

router = APIRouter(prefix="/inventory")

router.include_router(products_router)
router.include_router(stock_router)
