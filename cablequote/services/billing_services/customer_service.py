# cablequote/services/billing_services/customer_service.py
import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from cablequote.models.customer_models import Customer, SalesPerson
from cablequote.models.quotation_models import Quotation
from cablequote.schemas.customer_schemas import (
    CustomerCreate,
    CustomerListResponse,
    CustomerOut,
    CustomerResponse,
    CustomerSummaryResponse,
)
from cablequote.services.pricing_services import aggregate_by_status

logger = logging.getLogger(__name__)


async def _get_or_404(db: AsyncSession, customer_id: int) -> Customer:
    customer = await db.get(Customer, customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


async def _check_sales_person(db: AsyncSession, sales_person_id: Optional[int]):
    if sales_person_id is not None and not await db.get(SalesPerson, sales_person_id):
        raise HTTPException(status_code=400, detail=f"Sales person {sales_person_id} does not exist")


async def create_customer(db: AsyncSession, customer_data: CustomerCreate) -> CustomerResponse:
    await _check_sales_person(db, customer_data.sales_person_id)
    try:
        customer = Customer(**customer_data.model_dump())
        db.add(customer)
        await db.commit()
        await db.refresh(customer)
    except IntegrityError as e:
        await db.rollback()
        raise HTTPException(status_code=400, detail=f"Integrity error: {str(e.orig)}")

    logger.info("Customer %s created (ID: %s)", customer.name, customer.id)
    return CustomerResponse(message="Customer created successfully", data=CustomerOut.model_validate(customer))


# GET SINGLE CUSTOMER
async def get_customer(db: AsyncSession, customer_id: int) -> CustomerResponse:
    customer = await _get_or_404(db, customer_id)
    return CustomerResponse(message="Customer retrieved successfully", data=CustomerOut.model_validate(customer))


async def get_all_customers(
    db: AsyncSession,
    name: str = None,
    city: str = None,
    sales_person_id: int = None,
    limit: int = 50,
    offset: int = 0,
) -> CustomerListResponse:
    query = select(Customer)

    # Apply search filters
    if name:
        query = query.where(Customer.name.ilike(f"%{name}%"))
    if city:
        query = query.where(Customer.city.ilike(f"%{city}%"))
    if sales_person_id is not None:
        query = query.where(Customer.sales_person_id == sales_person_id)

    count_query = select(func.count()).select_from(query.subquery())
    total = (await db.execute(count_query)).scalar() or 0

    result = await db.execute(query.order_by(Customer.name).offset(offset).limit(limit))
    return CustomerListResponse(
        message="Customers retrieved successfully",
        total=total,
        data=[CustomerOut.model_validate(c) for c in result.scalars().all()],
    )


# UPDATE CUSTOMER
async def update_customer(db: AsyncSession, customer_id: int, data: dict) -> CustomerResponse:
    customer = await _get_or_404(db, customer_id)
    if "sales_person_id" in data:
        await _check_sales_person(db, data["sales_person_id"])
    for key, value in data.items():
        setattr(customer, key, value)
    await db.commit()
    await db.refresh(customer)

    response = await get_customer(db, customer_id)
    response.message = "Customer updated successfully"
    return response


async def delete_customer(db: AsyncSession, customer_id: int) -> CustomerResponse:
    response = await get_customer(db, customer_id)
    customer = await _get_or_404(db, customer_id)

    # Quotations keep pointing at their customer; refuse rather than orphan them
    in_use = await db.execute(select(func.count(Quotation.id)).where(Quotation.customer_id == customer_id))
    if in_use.scalar():
        raise HTTPException(status_code=400, detail="Customer has quotations and cannot be deleted")

    await db.delete(customer)
    await db.commit()
    logger.info("Customer %s deleted (ID: %s)", customer.name, customer_id)
    response.message = "Customer deleted successfully"
    return response


async def get_customer_summary(db: AsyncSession, customer_id: int) -> CustomerSummaryResponse:
    """Quotation count and value per status for one customer."""
    await _get_or_404(db, customer_id)
    result = await db.execute(select(Quotation).where(Quotation.customer_id == customer_id))
    return CustomerSummaryResponse(
        message="Customer summary retrieved successfully",
        customer_id=customer_id,
        data=aggregate_by_status(result.scalars().all()),
    )
