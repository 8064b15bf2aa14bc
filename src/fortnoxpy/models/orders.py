"""Order models."""

from pydantic import Field

from fortnoxpy.models.common import (
    EmailInformation,
    EmailInformationPayload,
    FortnoxModel,
    FortnoxPayload,
    MetaInformation,
)
from fortnoxpy.models.labels import Label
from fortnoxpy.scalars import Date, Floatish, FortnoxDate, Intish, Stringish


class OrderShort(FortnoxModel):
    """Order as it appears in list responses."""

    url: str = Field("", alias="@url")
    cancelled: bool = False
    currency: str = ""
    customer_name: str = ""
    customer_number: Stringish = ""
    delivery_date: Date = FortnoxDate()
    document_number: Stringish = ""
    external_invoice_reference1: str = ""
    external_invoice_reference2: str = ""
    order_date: Date = FortnoxDate()
    project: str = ""
    total: Floatish = 0.0


class OrderRow(FortnoxModel):
    account_number: Intish = 0
    article_number: Stringish = ""
    contribution_percent: Floatish = 0.0
    contribution_value: Floatish = 0.0
    cost_center: str = ""
    delivered_quantity: Stringish = ""
    description: str = ""
    discount: Floatish = 0.0
    discount_type: str = ""
    house_work: bool = False
    house_work_hours_to_report: Intish = 0
    house_work_type: str = ""
    ordered_quantity: Stringish = ""
    price: Floatish = 0.0
    project: str = ""
    total: Floatish = 0.0
    unit: str = ""
    vat: Floatish = Field(0.0, alias="VAT")


class Order(FortnoxModel):
    """A complete order."""

    url: str = Field("", alias="@url")
    url_tax_reduction_list: str = Field("", alias="@urlTaxReductionList")
    administration_fee: Floatish = 0.0
    administration_fee_vat: Floatish = Field(0.0, alias="AdministrationFeeVAT")
    address1: str = ""
    address2: str = ""
    basis_tax_reduction: Floatish = 0.0
    cancelled: bool = False
    city: str = ""
    comments: str = ""
    contribution_percent: Floatish = 0.0
    contribution_value: Floatish = 0.0
    copy_remarks: bool = False
    country: str = ""
    cost_center: str = ""
    currency: str = ""
    currency_rate: Floatish = 0.0
    currency_unit: Floatish = 0.0
    customer_name: str = ""
    customer_number: Stringish = ""
    delivery_address1: str = ""
    delivery_address2: str = ""
    delivery_city: str = ""
    delivery_country: str = ""
    delivery_date: Date = FortnoxDate()
    delivery_name: str = ""
    delivery_zip_code: str = ""
    document_number: Stringish = ""
    email_information: EmailInformation = Field(default_factory=EmailInformation)
    external_invoice_reference1: str = ""
    external_invoice_reference2: str = ""
    freight: Floatish = 0.0
    freight_vat: Floatish = Field(0.0, alias="FreightVAT")
    gross: Floatish = 0.0
    house_work: bool = False
    invoice_reference: Intish = 0
    labels: list[Label] = Field(default_factory=list)
    language: str = ""
    net: Floatish = 0.0
    not_completed: bool = False
    offer_reference: Intish = 0
    order_date: Date = FortnoxDate()
    order_rows: list[OrderRow] = Field(default_factory=list)
    organisation_number: str = ""
    our_reference: str = ""
    phone1: str = ""
    phone2: str = ""
    price_list: str = ""
    print_template: str = ""
    project: str = ""
    remarks: str = ""
    round_off: Floatish = 0.0
    sent: bool = False
    tax_reduction: Floatish = 0.0
    terms_of_delivery: str = ""
    terms_of_payment: Stringish = ""
    total: Floatish = 0.0
    total_to_pay: Floatish = 0.0
    total_vat: Floatish = Field(0.0, alias="TotalVAT")
    vat_included: bool = Field(False, alias="VATIncluded")
    way_of_delivery: str = ""
    your_reference: str = ""
    your_order_number: str = ""
    zip_code: str = ""


class CreateOrderRow(FortnoxPayload):
    account_number: int | None = None
    article_number: str | None = None
    cost_center: str | None = None
    delivered_quantity: str | None = None
    description: str | None = None
    discount: float | None = None
    discount_type: str | None = None
    house_work: bool | None = None
    house_work_hours_to_report: int | None = None
    house_work_type: str | None = None
    ordered_quantity: str | None = None
    price: float | None = None
    project: str | None = None
    unit: str | None = None
    vat: float | None = Field(None, alias="VAT")


class CreateOrder(FortnoxPayload):
    """Payload for creating an order. Only the set fields are sent."""

    administration_fee: float | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    comments: str | None = None
    copy_remarks: bool | None = None
    country: str | None = None
    cost_center: str | None = None
    currency: str | None = None
    currency_rate: float | None = None
    currency_unit: float | None = None
    customer_name: str | None = None
    customer_number: str | None = None
    delivery_address1: str | None = None
    delivery_address2: str | None = None
    delivery_city: str | None = None
    delivery_country: str | None = None
    delivery_date: Date | None = None
    delivery_name: str | None = None
    delivery_zip_code: str | None = None
    document_number: str | None = None
    email_information: EmailInformationPayload | None = None
    external_invoice_reference1: str | None = None
    external_invoice_reference2: str | None = None
    freight: float | None = None
    language: str | None = None
    labels: list[Label] | None = None
    not_completed: bool | None = None
    order_date: Date | None = None
    order_rows: list[CreateOrderRow] | None = None
    our_reference: str | None = None
    phone1: str | None = None
    phone2: str | None = None
    price_list: str | None = None
    print_template: str | None = None
    project: str | None = None
    remarks: str | None = None
    terms_of_delivery: str | None = None
    terms_of_payment: str | None = None
    vat_included: bool | None = Field(None, alias="VATIncluded")
    way_of_delivery: str | None = None
    your_reference: str | None = None
    your_order_number: str | None = None
    zip_code: str | None = None


class UpdateOrder(CreateOrder):
    """Payload for updating an order."""


class OrderResponse(FortnoxModel):
    order: Order


class ListOrdersResponse(FortnoxModel):
    orders: list[OrderShort] = Field(default_factory=list)
    meta_information: MetaInformation | None = None
