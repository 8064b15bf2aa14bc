"""Invoice models."""

from pydantic import Field

from fortnoxpy.models.common import (
    EmailInformation,
    EmailInformationPayload,
    FortnoxModel,
    FortnoxPayload,
    MetaInformation,
)
from fortnoxpy.models.labels import Label
from fortnoxpy.models.orders import CreateOrderRow, OrderRow
from fortnoxpy.scalars import Date, Floatish, FortnoxDate, Intish, Stringish


class InvoiceRow(OrderRow):
    """Invoice rows share the order row layout."""


class CreateInvoiceRow(CreateOrderRow):
    pass


class InvoiceShort(FortnoxModel):
    """Invoice as it appears in list responses."""

    url: str = Field("", alias="@url")
    balance: Floatish = 0.0
    booked: bool = False
    cancelled: bool = False
    currency: str = ""
    currency_rate: Floatish = 0.0
    currency_unit: Floatish = 0.0
    customer_name: str = ""
    customer_number: Stringish = ""
    document_number: Intish = 0
    due_date: Date = FortnoxDate()
    external_invoice_reference1: str = ""
    external_invoice_reference2: str = ""
    invoice_date: Date = FortnoxDate()
    nox_finans: bool = False
    ocr: str = Field("", alias="OCR")
    project: str = ""
    sent: bool = False
    terms_of_payment: Stringish = ""
    total: Floatish = 0.0
    way_of_delivery: str = ""


class EDIInformation(FortnoxModel):
    edi_global_location_number: str = Field("", alias="EDIGlobalLocationNumber")
    edi_global_location_number_delivery: str = Field(
        "", alias="EDIGlobalLocationNumberDelivery"
    )
    edi_invoice_extra1: str = Field("", alias="EDIInvoiceExtra1")
    edi_invoice_extra2: str = Field("", alias="EDIInvoiceExtra2")
    edi_our_electronic_reference: str = Field("", alias="EDIOurElectronicReference")
    edi_your_electronic_reference: str = Field("", alias="EDIYourElectronicReference")


class Invoice(FortnoxModel):
    """A complete invoice."""

    url: str = Field("", alias="@url")
    url_tax_reduction_list: str = Field("", alias="@urlTaxReductionList")
    address1: str = ""
    address2: str = ""
    accounting_method: str = ""
    administration_fee: Floatish = 0.0
    administration_fee_vat: Floatish = Field(0.0, alias="AdministrationFeeVAT")
    balance: Floatish = 0.0
    basis_tax_reduction: Floatish = 0.0
    booked: bool = False
    cancelled: bool = False
    city: str = ""
    comments: str = ""
    contract_reference: Intish = 0
    contribution_percent: Floatish = 0.0
    contribution_value: Floatish = 0.0
    cost_center: str = ""
    country: str = ""
    credit: Stringish = ""
    credit_invoice_reference: Intish = 0
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
    document_number: Intish = 0
    due_date: Date = FortnoxDate()
    edi_information: EDIInformation = Field(
        default_factory=EDIInformation, alias="EDIInformation"
    )
    eu_quarterly_report: bool = Field(False, alias="EUQuarterlyReport")
    email_information: EmailInformation = Field(default_factory=EmailInformation)
    external_invoice_reference1: str = ""
    external_invoice_reference2: str = ""
    freight: Floatish = 0.0
    freight_vat: Floatish = Field(0.0, alias="FreightVAT")
    gross: Floatish = 0.0
    house_work: bool = False
    invoice_date: Date = FortnoxDate()
    invoice_period_end: Date = FortnoxDate()
    invoice_period_start: Date = FortnoxDate()
    invoice_reference: Intish = 0
    invoice_rows: list[InvoiceRow] = Field(default_factory=list)
    invoice_type: str = ""
    labels: list[Label] = Field(default_factory=list)
    language: str = ""
    last_remind_date: Date = FortnoxDate()
    net: Floatish = 0.0
    not_completed: bool = False
    nox_finans: bool = False
    ocr: str = Field("", alias="OCR")
    offer_reference: Intish = 0
    order_reference: Intish = 0
    organisation_number: str = ""
    our_reference: str = ""
    payment_way: str = ""
    phone1: str = ""
    phone2: str = ""
    price_list: str = ""
    print_template: str = ""
    project: str = ""
    remarks: str = ""
    reminders: Intish = 0
    round_off: Floatish = 0.0
    sent: bool = False
    tax_reduction: Floatish = 0.0
    terms_of_delivery: str = ""
    terms_of_payment: Stringish = ""
    total: Floatish = 0.0
    total_to_pay: Floatish = 0.0
    total_vat: Floatish = Field(0.0, alias="TotalVAT")
    vat_included: bool = Field(False, alias="VATIncluded")
    voucher_number: Intish = 0
    voucher_series: str = ""
    voucher_year: Intish = 0
    way_of_delivery: str = ""
    your_order_number: str = ""
    your_reference: str = ""
    zip_code: str = ""


class CreateInvoice(FortnoxPayload):
    """Payload for creating an invoice. Only the set fields are sent."""

    address1: str | None = None
    address2: str | None = None
    administration_fee: float | None = None
    accounting_method: str | None = None
    city: str | None = None
    comments: str | None = None
    cost_center: str | None = None
    country: str | None = None
    credit_invoice_reference: int | None = None
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
    document_number: int | None = None
    due_date: Date | None = None
    email_information: EmailInformationPayload | None = None
    eu_quarterly_report: bool | None = Field(None, alias="EUQuarterlyReport")
    external_invoice_reference1: str | None = None
    external_invoice_reference2: str | None = None
    freight: float | None = None
    invoice_date: Date | None = None
    invoice_reference: int | None = None
    invoice_rows: list[CreateInvoiceRow] | None = None
    invoice_type: str | None = None
    labels: list[Label] | None = None
    language: str | None = None
    not_completed: bool | None = None
    ocr: str | None = Field(None, alias="OCR")
    our_reference: str | None = None
    payment_way: str | None = None
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
    your_order_number: str | None = None
    your_reference: str | None = None
    zip_code: str | None = None


class UpdateInvoice(CreateInvoice):
    """Payload for updating an invoice."""


class InvoiceResponse(FortnoxModel):
    invoice: Invoice


class ListInvoicesResponse(FortnoxModel):
    invoices: list[InvoiceShort] = Field(default_factory=list)
    meta_information: MetaInformation | None = None
