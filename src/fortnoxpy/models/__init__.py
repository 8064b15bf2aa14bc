"""Pydantic models for Fortnox resources."""

from fortnoxpy.models.articles import (
    Article,
    ArticleResponse,
    CreateArticle,
    ListArticlesResponse,
    UpdateArticle,
)
from fortnoxpy.models.common import (
    EmailInformation,
    EmailInformationPayload,
    ErrorInformation,
    ErrorResponse,
    FortnoxModel,
    FortnoxPayload,
    MetaInformation,
)
from fortnoxpy.models.company import CompanySettings, CompanySettingsResponse
from fortnoxpy.models.customers import (
    CreateCustomer,
    Customer,
    CustomerResponse,
    DefaultDeliveryTypes,
    DefaultDeliveryTypesPayload,
    DefaultTemplates,
    DefaultTemplatesPayload,
    ListCustomersResponse,
    UpdateCustomer,
)
from fortnoxpy.models.invoices import (
    CreateInvoice,
    CreateInvoiceRow,
    EDIInformation,
    Invoice,
    InvoiceResponse,
    InvoiceRow,
    InvoiceShort,
    ListInvoicesResponse,
    UpdateInvoice,
)
from fortnoxpy.models.labels import (
    Label,
    LabelPayload,
    LabelResponse,
    ListLabelsResponse,
)
from fortnoxpy.models.orders import (
    CreateOrder,
    CreateOrderRow,
    ListOrdersResponse,
    Order,
    OrderResponse,
    OrderRow,
    OrderShort,
    UpdateOrder,
)

__all__ = [
    "Article",
    "ArticleResponse",
    "CompanySettings",
    "CompanySettingsResponse",
    "CreateArticle",
    "CreateCustomer",
    "CreateInvoice",
    "CreateInvoiceRow",
    "CreateOrder",
    "CreateOrderRow",
    "Customer",
    "CustomerResponse",
    "DefaultDeliveryTypes",
    "DefaultDeliveryTypesPayload",
    "DefaultTemplates",
    "DefaultTemplatesPayload",
    "EDIInformation",
    "EmailInformation",
    "EmailInformationPayload",
    "ErrorInformation",
    "ErrorResponse",
    "FortnoxModel",
    "FortnoxPayload",
    "Invoice",
    "InvoiceResponse",
    "InvoiceRow",
    "InvoiceShort",
    "Label",
    "LabelPayload",
    "LabelResponse",
    "ListArticlesResponse",
    "ListCustomersResponse",
    "ListInvoicesResponse",
    "ListLabelsResponse",
    "ListOrdersResponse",
    "MetaInformation",
    "Order",
    "OrderResponse",
    "OrderRow",
    "OrderShort",
    "UpdateArticle",
    "UpdateCustomer",
    "UpdateInvoice",
    "UpdateOrder",
]
