"""Query string builders for the Fortnox list endpoints.

Every field is optional. A field left at its zero value (``0``, ``""``,
``None`` or the zero date) is omitted from the query string; there is no
way to send an explicit zero. ``extra`` is merged last and wins on key
collisions, so it can be used to pass filters this module does not know
about.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

import httpx

from fortnoxpy.scalars import FortnoxDate

# Fortnox filter formats
TIME_FORMAT = "%Y-%m-%d %H:%M"
DATE_FORMAT = "%Y-%m-%d"


def format_int(value: int) -> str:
    return str(value) if value > 0 else ""


def format_time(value: datetime | None) -> str:
    """Format a timestamp with minute precision and no timezone."""
    if value is None:
        return ""
    return value.strftime(TIME_FORMAT)


def format_date(value: date | FortnoxDate | None) -> str:
    if value is None:
        return ""
    if isinstance(value, FortnoxDate):
        return "" if value.is_zero else str(value)
    if isinstance(value, datetime):
        value = value.date()
    return value.strftime(DATE_FORMAT)


@dataclass
class QueryParams:
    """Pagination and free-form parameters shared by all list endpoints."""

    page: int = 0
    limit: int = 0
    offset: int = 0
    extra: Mapping[str, Sequence[str] | str] = field(default_factory=dict)

    def _named_values(self) -> list[tuple[str, str]]:
        return [
            ("limit", format_int(self.limit)),
            ("offset", format_int(self.offset)),
            ("page", format_int(self.page)),
        ]

    def to_values(self) -> dict[str, list[str]]:
        """Return the parameters as a key to list-of-values mapping."""
        values: dict[str, list[str]] = {}
        for key, value in self._named_values():
            if value:
                values[key] = [value]

        for key, extra_value in self.extra.items():
            if isinstance(extra_value, str):
                values[key] = [extra_value]
            else:
                values[key] = list(extra_value)
        return values

    def encode(self) -> str:
        """Return the URL encoded query string, without the leading ``?``."""
        return str(httpx.QueryParams(self.to_values()))


@dataclass
class OrderQueryParams(QueryParams):
    """Filters for orders and invoices."""

    last_modified: datetime | None = None
    financial_year: int = 0
    financial_year_date: date | FortnoxDate | None = None
    from_date: date | FortnoxDate | None = None
    to_date: date | FortnoxDate | None = None
    filter: str = ""
    sort_by: str = ""
    sort_order: str = ""

    def _named_values(self) -> list[tuple[str, str]]:
        return [
            ("lastmodified", format_time(self.last_modified)),
            ("financialyear", format_int(self.financial_year)),
            ("financialyeardate", format_date(self.financial_year_date)),
            ("fromdate", format_date(self.from_date)),
            ("todate", format_date(self.to_date)),
            ("filter", self.filter),
            ("sortby", self.sort_by),
            ("sortorder", self.sort_order),
        ] + super()._named_values()


@dataclass
class ArticleQueryParams(QueryParams):
    """Filters for articles."""

    article_number: str = ""
    description: str = ""
    ean: str = ""
    supplier_number: str = ""
    manufacturer: str = ""
    manufacturer_article_number: str = ""
    webshop: bool = False
    last_modified: datetime | None = None
    filter: str = ""

    def _named_values(self) -> list[tuple[str, str]]:
        return [
            ("articlenumber", self.article_number),
            ("description", self.description),
            ("ean", self.ean),
            ("suppliernumber", self.supplier_number),
            ("manufacturer", self.manufacturer),
            ("manufacturerarticlenumber", self.manufacturer_article_number),
            ("webshop", "true" if self.webshop else ""),
            ("lastmodified", format_time(self.last_modified)),
            ("filter", self.filter),
        ] + super()._named_values()


@dataclass
class CustomerQueryParams(QueryParams):
    """Filters for customers."""

    city: str = ""
    customer_number: str = ""
    email: str = ""
    gln: str = ""
    gln_delivery: str = ""
    name: str = ""
    organisation_number: str = ""
    phone1: str = ""
    zip_code: str = ""
    last_modified: datetime | None = None
    filter: str = ""

    def _named_values(self) -> list[tuple[str, str]]:
        return [
            ("city", self.city),
            ("customernumber", self.customer_number),
            ("email", self.email),
            ("gln", self.gln),
            ("glndelivery", self.gln_delivery),
            ("name", self.name),
            ("organisationnumber", self.organisation_number),
            ("phone1", self.phone1),
            ("zipcode", self.zip_code),
            ("lastmodified", format_time(self.last_modified)),
            ("filter", self.filter),
        ] + super()._named_values()


def encode_query(query: QueryParams | Mapping[str, Any] | str | None) -> str:
    """Turn any accepted query value into a query string."""
    if query is None:
        return ""
    if isinstance(query, QueryParams):
        return query.encode()
    return str(httpx.QueryParams(query))
