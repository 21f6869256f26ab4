# cablequote/routers/billing/delivery_challans_router.py
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from cablequote.core.db import get_db
from cablequote.schemas.challan_schemas import (
    DeliveryChallanCreate,
    DeliveryChallanDraftResponse,
    DeliveryChallanListResponse,
    DeliveryChallanResponse,
    DeliveryChallanUpdate,
)
from cablequote.services.billing_services import delivery_challan_service
from cablequote.utils.get_user import get_current_user
from cablequote.utils.check_roles import require_role, ALL_ROLES, CHALLAN_WRITERS

router = APIRouter(prefix="/delivery-challans", tags=["Delivery Challans"])


# --------------------------
# DRAFT FROM QUOTATION (no save)
# --------------------------
@router.get("/from-quotation/{quotation_id}", response_model=DeliveryChallanDraftResponse)
@require_role(CHALLAN_WRITERS)
async def draft_challan_route(
    quotation_id: int,
    challan_date: Optional[date] = Query(None, description="Defaults to today"),
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await delivery_challan_service.draft_from_quotation(db, quotation_id, challan_date)


# CREATE
@router.post("/", response_model=DeliveryChallanResponse, status_code=status.HTTP_201_CREATED)
@require_role(CHALLAN_WRITERS)
async def create_challan_route(
    data: DeliveryChallanCreate,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await delivery_challan_service.create_challan(db, data, _user)


# GET ALL
@router.get("/", response_model=DeliveryChallanListResponse)
@require_role(ALL_ROLES)
async def list_challans_route(
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user),
    customer_id: Optional[int] = Query(None, description="Filter by customer"),
    quotation_id: Optional[int] = Query(None, description="Filter by quotation"),
):
    return await delivery_challan_service.list_challans(db, customer_id=customer_id, quotation_id=quotation_id)


# GET SINGLE
@router.get("/{challan_id}", response_model=DeliveryChallanResponse)
@require_role(ALL_ROLES)
async def get_challan_route(
    challan_id: int,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await delivery_challan_service.get_challan(db, challan_id)


# UPDATE (full document)
@router.put("/{challan_id}", response_model=DeliveryChallanResponse)
@require_role(CHALLAN_WRITERS)
async def update_challan_route(
    challan_id: int,
    data: DeliveryChallanUpdate,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await delivery_challan_service.update_challan(db, challan_id, data, _user)


# DELETE
@router.delete("/{challan_id}", response_model=DeliveryChallanResponse)
@require_role(CHALLAN_WRITERS)
async def delete_challan_route(
    challan_id: int,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await delivery_challan_service.delete_challan(db, challan_id, _user)
