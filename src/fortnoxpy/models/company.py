"""Company settings models."""

from pydantic import Field

from fortnoxpy.models.common import FortnoxModel
from fortnoxpy.scalars import Intish


class CompanySettings(FortnoxModel):
    address: str = ""
    bg: str = Field("", alias="BG")
    bic: str = Field("", alias="BIC")
    branch_code: str = ""
    city: str = ""
    contact_first_name: str = ""
    contact_last_name: str = ""
    country: str = ""
    country_code: str = ""
    database_number: Intish = 0
    domicile: str = ""
    email: str = ""
    fax: str = ""
    iban: str = Field("", alias="IBAN")
    name: str = ""
    organization_number: str = ""
    pg: str = Field("", alias="PG")
    phone1: str = ""
    phone2: str = ""
    tax_enabled: bool = False
    vat_number: str = Field("", alias="VATNumber")
    visit_address: str = ""
    visit_city: str = ""
    visit_country: str = ""
    visit_country_code: str = ""
    visit_name: str = ""
    visit_zip_code: str = ""
    www: str = Field("", alias="WWW")
    zip_code: str = ""


class CompanySettingsResponse(FortnoxModel):
    company_settings: CompanySettings
