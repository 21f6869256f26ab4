# cablequote/services/billing_services/document_service.py
"""
Print payloads for the three quotation layouts.

standard    goods only, words up to 99,99,99,999 with crore grouping
discounted  goods only, words up to 99,99,999 in lakh/thousand/hundred
airfreight  goods plus air freight per line; the grand total is payable
"""
import enum
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from cablequote.core.config import (
    COMPANY_ADDRESS,
    COMPANY_CONTACT,
    COMPANY_GSTIN,
    COMPANY_NAME,
    QUOTATION_NUMBER_PREFIX,
)
from cablequote.models.customer_models import SalesPerson
from cablequote.schemas.quotation_schemas import (
    CompanyHeader,
    DocumentLine,
    DocumentParty,
    QuotationDocument,
    QuotationDocumentResponse,
)
from cablequote.services.billing_services.quotation_service import get_quotation_or_404, check_ownership, own_sales_person_id
from cablequote.services.pricing_services import (
    DISCOUNTED_CEILING,
    STANDARD_CEILING,
    aggregate_totals,
    price_item,
    to_indian_words,
)

logger = logging.getLogger(__name__)


class DocumentLayout(str, enum.Enum):
    STANDARD = "standard"
    DISCOUNTED = "discounted"
    AIRFREIGHT = "airfreight"


# layout -> (title, words ceiling, crore grouping, freight payable)
LAYOUTS = {
    DocumentLayout.STANDARD: ("QUOTATION", STANDARD_CEILING, True, False),
    DocumentLayout.DISCOUNTED: ("QUOTATION", DISCOUNTED_CEILING, False, False),
    DocumentLayout.AIRFREIGHT: ("QUOTATION WITH AIR FREIGHT", STANDARD_CEILING, True, True),
}


def company_header() -> CompanyHeader:
    return CompanyHeader(name=COMPANY_NAME, address=COMPANY_ADDRESS, contact=COMPANY_CONTACT, gstin=COMPANY_GSTIN)


def quotation_number(quotation_id: int) -> str:
    return f"{QUOTATION_NUMBER_PREFIX}{quotation_id}"


def build_document(quotation, layout: DocumentLayout, sales_person_name: str = None) -> QuotationDocument:
    title, ceiling, use_crore, with_freight = LAYOUTS[DocumentLayout(layout)]

    lines = []
    for index, item in enumerate(quotation.lines):
        pricing = price_item(item)
        freight = pricing.freight_amount if with_freight else 0
        lines.append(DocumentLine(
            sl_no=index + 1,
            part_no=item.part_no,
            description=item.description,
            uom=item.uom,
            quantity=item.quantity_ordered or 0,
            list_price=item.unit_price,
            price_source=item.price_source,
            discount_percent=item.discount_percent,
            unit_price=pricing.net_unit_price,
            amount=pricing.line_amount,
            freight_amount=freight,
            total=pricing.line_amount + freight,
            stock_status=item.stock_status,
            freight_lead_time=item.freight_lead_time if with_freight else None,
        ))

    totals = aggregate_totals(quotation.lines)
    payable = totals.grand_total if with_freight else totals.total_amount

    customer = quotation.customer
    party = DocumentParty(
        name=customer.name,
        address=customer.address,
        city=customer.city,
        pincode=customer.pincode,
    ) if customer else DocumentParty()

    return QuotationDocument(
        layout=DocumentLayout(layout).value,
        title=title,
        quotation_number=quotation_number(quotation.id),
        quotation_date=quotation.quotation_date,
        company=company_header(),
        customer=party,
        contact_person=quotation.contact_person,
        contact_number=quotation.contact_number,
        sales_person=sales_person_name,
        prepared_by=quotation.prepared_by,
        payment_terms=quotation.payment_terms,
        other_terms=quotation.other_terms,
        lines=lines,
        totals=totals,
        amount_payable=payable,
        amount_in_words=to_indian_words(payable, ceiling=ceiling, use_crore=use_crore),
    )


async def get_quotation_document(db: AsyncSession, quotation_id: int, layout: DocumentLayout, current_user) -> QuotationDocumentResponse:
    quotation = await get_quotation_or_404(db, quotation_id)
    check_ownership(quotation, await own_sales_person_id(db, current_user))

    sales_person_name = None
    if quotation.sales_person_id:
        sales_person = await db.get(SalesPerson, quotation.sales_person_id)
        sales_person_name = sales_person.name if sales_person else None

    document = build_document(quotation, layout, sales_person_name)
    logger.debug("Quotation %s rendered as %s", quotation_id, document.layout)
    return QuotationDocumentResponse(message="Quotation document generated successfully", data=document)
