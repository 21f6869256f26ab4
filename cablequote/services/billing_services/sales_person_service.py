# cablequote/services/billing_services/sales_person_service.py
import logging

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from cablequote.models.customer_models import SalesPerson
from cablequote.schemas.customer_schemas import (
    SalesPersonCreate,
    SalesPersonListResponse,
    SalesPersonOut,
    SalesPersonResponse,
)

logger = logging.getLogger(__name__)


async def _get_or_404(db: AsyncSession, sales_person_id: int) -> SalesPerson:
    sales_person = await db.get(SalesPerson, sales_person_id)
    if not sales_person:
        raise HTTPException(status_code=404, detail="Sales person not found")
    return sales_person


async def _commit(db: AsyncSession):
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(status_code=400, detail="Sales person with this name already exists.")


async def create_sales_person(db: AsyncSession, data: SalesPersonCreate) -> SalesPersonResponse:
    sales_person = SalesPerson(**data.model_dump())
    db.add(sales_person)
    await _commit(db)
    await db.refresh(sales_person)
    logger.info("Sales person %s created (ID: %s)", sales_person.name, sales_person.id)
    return SalesPersonResponse(
        message="Sales person created successfully",
        data=SalesPersonOut.model_validate(sales_person),
    )


async def list_sales_persons(db: AsyncSession) -> SalesPersonListResponse:
    result = await db.execute(select(SalesPerson).order_by(SalesPerson.name))
    return SalesPersonListResponse(
        message="Sales persons retrieved successfully",
        data=[SalesPersonOut.model_validate(sp) for sp in result.scalars().all()],
    )


async def get_sales_person(db: AsyncSession, sales_person_id: int) -> SalesPersonResponse:
    sales_person = await _get_or_404(db, sales_person_id)
    return SalesPersonResponse(
        message="Sales person retrieved successfully",
        data=SalesPersonOut.model_validate(sales_person),
    )


async def update_sales_person(db: AsyncSession, sales_person_id: int, data: dict) -> SalesPersonResponse:
    sales_person = await _get_or_404(db, sales_person_id)
    for key, value in data.items():
        setattr(sales_person, key, value)
    await _commit(db)
    await db.refresh(sales_person)
    return SalesPersonResponse(
        message="Sales person updated successfully",
        data=SalesPersonOut.model_validate(sales_person),
    )


async def delete_sales_person(db: AsyncSession, sales_person_id: int) -> SalesPersonResponse:
    sales_person = await _get_or_404(db, sales_person_id)
    response = SalesPersonResponse(
        message="Sales person deleted successfully",
        data=SalesPersonOut.model_validate(sales_person),
    )
    await db.delete(sales_person)
    await db.commit()
    logger.info("Sales person %s deleted (ID: %s)", sales_person.name, sales_person_id)
    return response
