# cablequote/routers/billing/quotations_router.py
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from cablequote.core.db import get_db
from cablequote.schemas.pricing_schemas import DateRange, QuotationStatus
from cablequote.schemas.quotation_schemas import (
    QuotationCreate,
    QuotationDocumentResponse,
    QuotationListResponse,
    QuotationPreviewRequest,
    QuotationPreviewResponse,
    QuotationResponse,
    QuotationTotalsResponse,
    QuotationUpdate,
)
from cablequote.services.billing_services.document_service import DocumentLayout, get_quotation_document
from cablequote.services.billing_services.quotation_service import (
    create_quotation,
    delete_quotation,
    get_quotation,
    get_quotation_totals,
    list_quotations,
    preview_lines,
    reprice_quotation,
    update_quotation,
)
from cablequote.utils.get_user import get_current_user
from cablequote.utils.check_roles import require_role, ADMIN_ONLY, ALL_ROLES, QUOTATION_WRITERS

router = APIRouter(prefix="/quotations", tags=["Quotations"])


# --------------------------
# PREVIEW (no save)
# --------------------------
@router.post("/preview", response_model=QuotationPreviewResponse)
@require_role(ALL_ROLES)
async def preview_quotation_route(
    data: QuotationPreviewRequest,
    _user=Depends(get_current_user)
):
    return preview_lines(data.lines)


# --------------------------
# CREATE QUOTATION
# --------------------------
@router.post("/", response_model=QuotationResponse, status_code=status.HTTP_201_CREATED)
@require_role(QUOTATION_WRITERS)
async def create_quotation_route(
    data: QuotationCreate,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await create_quotation(db, data, _user)


# --------------------------
# LIST ALL QUOTATIONS
# --------------------------
@router.get("/", response_model=QuotationListResponse)
@require_role(ALL_ROLES)
async def list_quotations_route(
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user),
    status: Optional[QuotationStatus] = Query(None, description="Filter by status"),
    customer_id: Optional[int] = Query(None, description="Filter by customer"),
    sales_person_id: Optional[int] = Query(None, description="Filter by sales person"),
    date_range: DateRange = Query(DateRange.ALL, alias="range", description="all, week, month or year back from today"),
):
    return await list_quotations(
        db, _user,
        status=status.value if status else None,
        customer_id=customer_id,
        sales_person_id=sales_person_id,
        date_range=date_range,
    )


# --------------------------
# GET SINGLE QUOTATION BY ID
# --------------------------
@router.get("/{quotation_id}", response_model=QuotationResponse)
@require_role(ALL_ROLES)
async def get_quotation_route(
    quotation_id: int,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await get_quotation(db, quotation_id, _user)


# --------------------------
# UPDATE QUOTATION (full document)
# --------------------------
@router.put("/{quotation_id}", response_model=QuotationResponse)
@require_role(QUOTATION_WRITERS)
async def update_quotation_route(
    quotation_id: int,
    data: QuotationUpdate,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await update_quotation(db, quotation_id, data, _user)


# --------------------------
# DELETE QUOTATION
# --------------------------
@router.delete("/{quotation_id}", response_model=QuotationResponse)
@require_role(ADMIN_ONLY)
async def delete_quotation_route(
    quotation_id: int,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await delete_quotation(db, quotation_id, _user)


# --------------------------
# TOTALS
# --------------------------
@router.get("/{quotation_id}/totals", response_model=QuotationTotalsResponse)
@require_role(ALL_ROLES)
async def quotation_totals_route(
    quotation_id: int,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await get_quotation_totals(db, quotation_id, _user)


# --------------------------
# REPRICE FROM PRICE BOOK
# --------------------------
@router.post("/{quotation_id}/reprice", response_model=QuotationResponse)
@require_role(QUOTATION_WRITERS)
async def reprice_quotation_route(
    quotation_id: int,
    on: Optional[date] = Query(None, description="Price date, defaults to the quotation date"),
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await reprice_quotation(db, quotation_id, _user, on)


# --------------------------
# PRINT DOCUMENT
# --------------------------
@router.get("/{quotation_id}/document", response_model=QuotationDocumentResponse)
@require_role(ALL_ROLES)
async def quotation_document_route(
    quotation_id: int,
    layout: DocumentLayout = Query(DocumentLayout.STANDARD),
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await get_quotation_document(db, quotation_id, layout, _user)
