"""Article models."""

from pydantic import Field

from fortnoxpy.models.common import FortnoxModel, FortnoxPayload, MetaInformation
from fortnoxpy.scalars import Floatish, Intish, Stringish


class Article(FortnoxModel):
    url: str = Field("", alias="@url")
    active: bool = False
    article_number: Stringish = ""
    bulky: bool = False
    construction_account: Intish = 0
    depth: Intish = 0
    description: str = ""
    disposable_quantity: Floatish = 0.0
    ean: str = Field("", alias="EAN")
    eu_account: Intish = Field(0, alias="EUAccount")
    euvat_account: Intish = Field(0, alias="EUVATAccount")
    expired: bool = False
    export_account: Intish = 0
    height: Intish = 0
    housework: bool = False
    housework_type: str = ""
    manufacturer: str = ""
    manufacturer_article_number: str = ""
    note: str = ""
    purchase_account: Intish = 0
    purchase_price: Floatish = 0.0
    quantity_in_stock: Floatish = 0.0
    reserved_quantity: Floatish = 0.0
    sales_account: Intish = 0
    sales_price: Floatish = 0.0
    stock_goods: bool = False
    stock_place: str = ""
    stock_value: Floatish = 0.0
    stock_warning: Floatish = 0.0
    supplier_name: str = ""
    supplier_number: Stringish = ""
    type: str = ""
    unit: str = ""
    vat: Floatish = Field(0.0, alias="VAT")
    webshop_article: bool = False
    weight: Intish = 0
    width: Intish = 0


class CreateArticle(FortnoxPayload):
    """Payload for creating an article. Only the set fields are sent."""

    article_number: str | None = None
    active: bool | None = None
    bulky: bool | None = None
    construction_account: int | None = None
    depth: int | None = None
    description: str | None = None
    ean: str | None = Field(None, alias="EAN")
    eu_account: int | None = Field(None, alias="EUAccount")
    euvat_account: int | None = Field(None, alias="EUVATAccount")
    expired: bool | None = None
    export_account: int | None = None
    height: int | None = None
    housework: bool | None = None
    housework_type: str | None = None
    manufacturer: str | None = None
    manufacturer_article_number: str | None = None
    note: str | None = None
    purchase_account: int | None = None
    purchase_price: float | None = None
    quantity_in_stock: float | None = None
    sales_account: int | None = None
    stock_goods: bool | None = None
    stock_place: str | None = None
    stock_warning: float | None = None
    supplier_number: str | None = None
    type: str | None = None
    unit: str | None = None
    vat: float | None = Field(None, alias="VAT")
    webshop_article: bool | None = None
    weight: int | None = None
    width: int | None = None


class UpdateArticle(CreateArticle):
    """Payload for updating an article."""


class ArticleResponse(FortnoxModel):
    article: Article


class ListArticlesResponse(FortnoxModel):
    articles: list[Article] = Field(default_factory=list)
    meta_information: MetaInformation | None = None
