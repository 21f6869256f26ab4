from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from cablequote.schemas.customer_schemas import (
    CustomerCreate, CustomerUpdate,
    CustomerResponse, CustomerListResponse, CustomerSummaryResponse
)
from cablequote.services.billing_services import customer_service
from cablequote.core.db import get_db
from cablequote.utils.get_user import get_current_user
from cablequote.utils.check_roles import require_role, ALL_ROLES, MASTER_WRITERS

router = APIRouter(prefix="/customers", tags=["Customers"])

# CREATE
@router.post("/", response_model=CustomerResponse)
@require_role(MASTER_WRITERS)
async def create_customer_route(
    customer: CustomerCreate,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await customer_service.create_customer(db, customer)


# GET SINGLE
@router.get("/{customer_id}", response_model=CustomerResponse)
@require_role(ALL_ROLES)
async def get_customer_route(
    customer_id: int,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await customer_service.get_customer(db, customer_id)


# STATUS SUMMARY
@router.get("/{customer_id}/summary", response_model=CustomerSummaryResponse)
@require_role(ALL_ROLES)
async def customer_summary_route(
    customer_id: int,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await customer_service.get_customer_summary(db, customer_id)


# GET ALL WITH SEARCH, PAGINATION
@router.get("/", response_model=CustomerListResponse)
@require_role(ALL_ROLES)
async def list_customers_route(
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user),
    name: str = Query(None, description="Filter by name"),
    city: str = Query(None, description="Filter by city"),
    sales_person_id: int = Query(None, description="Filter by assigned sales person"),
    limit: int = Query(50, ge=1, le=500, description="Limit number of results"),
    offset: int = Query(0, ge=0, description="Offset for pagination"),
):
    return await customer_service.get_all_customers(db, name, city, sales_person_id, limit, offset)


# UPDATE
@router.put("/{customer_id}", response_model=CustomerResponse)
@require_role(MASTER_WRITERS)
async def update_customer_route(
    customer_id: int,
    customer: CustomerUpdate,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await customer_service.update_customer(db, customer_id, customer.model_dump(exclude_unset=True))


# DELETE
@router.delete("/{customer_id}", response_model=CustomerResponse)
@require_role(MASTER_WRITERS)
async def delete_customer_route(
    customer_id: int,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await customer_service.delete_customer(db, customer_id)
