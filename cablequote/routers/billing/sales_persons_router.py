from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from cablequote.schemas.customer_schemas import (
    SalesPersonCreate, SalesPersonUpdate,
    SalesPersonResponse, SalesPersonListResponse
)
from cablequote.services.billing_services import sales_person_service
from cablequote.core.db import get_db
from cablequote.utils.get_user import get_current_user
from cablequote.utils.check_roles import require_role, ALL_ROLES, MASTER_WRITERS

router = APIRouter(prefix="/sales-persons", tags=["Sales Persons"])

# CREATE
@router.post("/", response_model=SalesPersonResponse)
@require_role(MASTER_WRITERS)
async def create_sales_person_route(
    sales_person: SalesPersonCreate,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await sales_person_service.create_sales_person(db, sales_person)


# GET ALL
@router.get("/", response_model=SalesPersonListResponse)
@require_role(ALL_ROLES)
async def list_sales_persons_route(db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await sales_person_service.list_sales_persons(db)


# GET SINGLE
@router.get("/{sales_person_id}", response_model=SalesPersonResponse)
@require_role(ALL_ROLES)
async def get_sales_person_route(
    sales_person_id: int,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await sales_person_service.get_sales_person(db, sales_person_id)


# UPDATE
@router.put("/{sales_person_id}", response_model=SalesPersonResponse)
@require_role(MASTER_WRITERS)
async def update_sales_person_route(
    sales_person_id: int,
    sales_person: SalesPersonUpdate,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await sales_person_service.update_sales_person(
        db, sales_person_id, sales_person.model_dump(exclude_unset=True)
    )


# DELETE
@router.delete("/{sales_person_id}", response_model=SalesPersonResponse)
@require_role(MASTER_WRITERS)
async def delete_sales_person_route(
    sales_person_id: int,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await sales_person_service.delete_sales_person(db, sales_person_id)
