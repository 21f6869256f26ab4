from fastapi import APIRouter
from .customers_router import router as customers_router
from .sales_persons_router import router as sales_persons_router
from .quotations_router import router as quotations_router
from .delivery_challans_router import router as delivery_challans_router

router = APIRouter(prefix="/billing")

router.include_router(customers_router)
router.include_router(sales_persons_router)
router.include_router(quotations_router)
router.include_router(delivery_challans_router)
