# cablequote/models/__init__.py
from cablequote.models.user_models import User
from cablequote.models.customer_models import Customer, SalesPerson
from cablequote.models.product_models import Product, ProductPrice
from cablequote.models.quotation_models import Quotation, QuotationItem
from cablequote.models.stock_models import StockStatement, PendingSalesOrder
from cablequote.models.challan_models import DeliveryChallan, DeliveryChallanItem
