"""Customer models."""

from pydantic import Field

from fortnoxpy.models.common import FortnoxModel, FortnoxPayload, MetaInformation
from fortnoxpy.scalars import Floatish, Intish, Stringish


class DefaultDeliveryTypes(FortnoxModel):
    invoice: str = ""
    offer: str = ""
    order: str = ""


class DefaultTemplates(FortnoxModel):
    cash_invoice: str = ""
    invoice: str = ""
    offer: str = ""
    order: str = ""


class DefaultDeliveryTypesPayload(FortnoxPayload):
    invoice: str | None = None
    offer: str | None = None
    order: str | None = None


class DefaultTemplatesPayload(FortnoxPayload):
    cash_invoice: str | None = None
    invoice: str | None = None
    offer: str | None = None
    order: str | None = None


class Customer(FortnoxModel):
    url: str = Field("", alias="@url")
    active: bool = False
    address1: str = ""
    address2: str = ""
    city: str = ""
    comments: str = ""
    cost_center: str = ""
    country: str = ""
    country_code: str = ""
    currency: str = ""
    customer_number: Stringish = ""
    default_delivery_types: DefaultDeliveryTypes = Field(
        default_factory=DefaultDeliveryTypes
    )
    default_templates: DefaultTemplates = Field(default_factory=DefaultTemplates)
    delivery_address1: str = ""
    delivery_address2: str = ""
    delivery_city: str = ""
    delivery_country: str = ""
    delivery_country_code: str = ""
    delivery_fax: str = ""
    delivery_name: str = ""
    delivery_phone1: str = ""
    delivery_phone2: str = ""
    delivery_zip_code: str = ""
    email: str = ""
    email_invoice: str = ""
    email_invoice_bcc: str = Field("", alias="EmailInvoiceBCC")
    email_invoice_cc: str = Field("", alias="EmailInvoiceCC")
    email_offer: str = ""
    email_offer_bcc: str = Field("", alias="EmailOfferBCC")
    email_offer_cc: str = Field("", alias="EmailOfferCC")
    email_order: str = ""
    email_order_bcc: str = Field("", alias="EmailOrderBCC")
    email_order_cc: str = Field("", alias="EmailOrderCC")
    fax: str = ""
    gln: str = Field("", alias="GLN")
    gln_delivery: str = Field("", alias="GLNDelivery")
    invoice_administration_fee: Floatish = 0.0
    invoice_discount: Floatish = 0.0
    invoice_freight: Floatish = 0.0
    invoice_remark: str = ""
    name: str = ""
    organisation_number: str = ""
    our_reference: str = ""
    phone1: str = ""
    phone2: str = ""
    price_list: str = ""
    project: Stringish = ""
    sales_account: Intish = 0
    show_price_vat_included: bool = Field(False, alias="ShowPriceVATIncluded")
    terms_of_delivery: str = ""
    terms_of_payment: Stringish = ""
    type: str = ""
    vat_number: str = Field("", alias="VATNumber")
    vat_type: str = Field("", alias="VATType")
    visiting_address: str = ""
    visiting_city: str = ""
    visiting_country: str = ""
    visiting_country_code: str = ""
    visiting_zip_code: str = ""
    www: str = Field("", alias="WWW")
    way_of_delivery: str = ""
    your_reference: str = ""
    zip_code: str = ""


class CreateCustomer(FortnoxPayload):
    """Payload for creating a customer. Only the set fields are sent."""

    active: bool | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    comments: str | None = None
    cost_center: str | None = None
    country_code: str | None = None
    currency: str | None = None
    customer_number: str | None = None
    default_delivery_types: DefaultDeliveryTypesPayload | None = None
    default_templates: DefaultTemplatesPayload | None = None
    delivery_address1: str | None = None
    delivery_address2: str | None = None
    delivery_city: str | None = None
    delivery_country_code: str | None = None
    delivery_fax: str | None = None
    delivery_name: str | None = None
    delivery_phone1: str | None = None
    delivery_phone2: str | None = None
    delivery_zip_code: str | None = None
    email: str | None = None
    email_invoice: str | None = None
    email_invoice_bcc: str | None = Field(None, alias="EmailInvoiceBCC")
    email_invoice_cc: str | None = Field(None, alias="EmailInvoiceCC")
    email_offer: str | None = None
    email_offer_bcc: str | None = Field(None, alias="EmailOfferBCC")
    email_offer_cc: str | None = Field(None, alias="EmailOfferCC")
    email_order: str | None = None
    email_order_bcc: str | None = Field(None, alias="EmailOrderBCC")
    email_order_cc: str | None = Field(None, alias="EmailOrderCC")
    fax: str | None = None
    gln: str | None = Field(None, alias="GLN")
    gln_delivery: str | None = Field(None, alias="GLNDelivery")
    invoice_administration_fee: float | None = None
    invoice_discount: float | None = None
    invoice_freight: float | None = None
    invoice_remark: str | None = None
    name: str | None = None
    organisation_number: str | None = None
    our_reference: str | None = None
    phone1: str | None = None
    phone2: str | None = None
    price_list: str | None = None
    project: str | None = None
    sales_account: int | None = None
    show_price_vat_included: bool | None = Field(None, alias="ShowPriceVATIncluded")
    terms_of_delivery: str | None = None
    terms_of_payment: str | None = None
    type: str | None = None
    vat_number: str | None = Field(None, alias="VATNumber")
    vat_type: str | None = Field(None, alias="VATType")
    visiting_address: str | None = None
    visiting_city: str | None = None
    visiting_country_code: str | None = None
    visiting_zip_code: str | None = None
    www: str | None = Field(None, alias="WWW")
    way_of_delivery: str | None = None
    your_reference: str | None = None
    zip_code: str | None = None


class UpdateCustomer(CreateCustomer):
    """Payload for updating a customer."""


class CustomerResponse(FortnoxModel):
    customer: Customer


class ListCustomersResponse(FortnoxModel):
    customers: list[Customer] = Field(default_factory=list)
    meta_information: MetaInformation | None = None
