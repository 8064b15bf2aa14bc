"""Asynchronous Fortnox API client."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from fortnoxpy.auth import TokenAuth
from fortnoxpy.client_base import (
    ClientConfig,
    Query,
    build_headers,
    build_url,
    encode_body,
    envelope,
    handle_response,
    resource_path,
)
from fortnoxpy.exceptions import FortnoxTransportError
from fortnoxpy.models import *  # noqa: F403
from fortnoxpy.query import ArticleQueryParams, CustomerQueryParams, OrderQueryParams

logger = logging.getLogger(__name__)


class AsyncFortnoxClient:
    """Asynchronous client for the Fortnox API.

    Every call sends the integration's access token and client secret.
    Cancelling the awaiting task aborts the request in flight.
    """

    def __init__(
        self,
        *,
        access_token: str | None = None,
        client_secret: str | None = None,
        base_url: str = ClientConfig.BASE_URL,
        timeout: float = ClientConfig.DEFAULT_TIMEOUT,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize async Fortnox client.

        Args:
            access_token: Access token for the user's company
            client_secret: Client secret of the integration
            base_url: Base URL for API (default: https://api.fortnox.se/3/)
            timeout: Request timeout in seconds
            config: Complete configuration, used instead of the arguments above
            http_client: Optional httpx client to send requests with. It is
                not closed by this client.

        Raises:
            ValueError: If no config is given and a credential is missing
        """
        if config is None:
            config = ClientConfig(
                access_token=access_token or "",
                client_secret=client_secret or "",
                base_url=base_url,
                timeout=timeout,
            )
        self.config = config
        self.auth = TokenAuth(config.access_token, config.client_secret)

        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient(
            timeout=config.timeout,
            verify=config.verify,
        )

    async def __aenter__(self) -> AsyncFortnoxClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this client created it."""
        if self._owns_client:
            await self.client.aclose()

    async def request(
        self,
        method: str,
        resource: str,
        *,
        body: Any = None,
        params: Query = None,
        response_model: type[Any] | None = None,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> Any:
        """Send one request and classify the response.

        See FortnoxClient.request.
        """
        url = build_url(self.config.base_url, resource, params)
        request_headers = build_headers(self.config.headers, self.auth.get_headers(), headers)
        content = encode_body(method, body)

        kwargs: dict[str, Any] = {}
        if timeout is not None:
            kwargs["timeout"] = timeout

        try:
            response = await self.client.request(
                method=method,
                url=url,
                headers=request_headers,
                content=content,
                **kwargs,
            )
        except httpx.TransportError as e:
            raise FortnoxTransportError(f"error sending request: {e}") from e

        logger.debug("%s %s -> %s", method, resource, response.status_code)
        return handle_response(response, response_model)

    # Order endpoints

    async def list_orders(
        self, params: OrderQueryParams | Mapping[str, Any] | None = None
    ) -> ListOrdersResponse:  # noqa: F405
        """List or search orders.

        Args:
            params: Filters and pagination

        Returns:
            Orders and pagination meta information
        """
        return await self.request(
            "GET",
            "orders",
            params=params,
            response_model=ListOrdersResponse,  # noqa: F405
        )

    async def get_order(self, document_number: str | int) -> Order:  # noqa: F405
        """Get a specific order.

        Args:
            document_number: Order document number

        Returns:
            Order details
        """
        response = await self.request(
            "GET",
            resource_path("orders", document_number),
            response_model=OrderResponse,  # noqa: F405
        )
        return response.order

    async def create_order(
        self, order: CreateOrder | Mapping[str, Any]  # noqa: F405
    ) -> Order:  # noqa: F405
        """Create an order.

        Args:
            order: Order payload

        Returns:
            The created order
        """
        response = await self.request(
            "POST",
            "orders",
            body=envelope("Order", order, CreateOrder),  # noqa: F405
            response_model=OrderResponse,  # noqa: F405
        )
        return response.order

    async def update_order(
        self,
        document_number: str | int,
        order: UpdateOrder | Mapping[str, Any],  # noqa: F405
    ) -> Order:  # noqa: F405
        """Update an order.

        Args:
            document_number: Order document number
            order: Fields to change

        Returns:
            The updated order
        """
        response = await self.request(
            "PUT",
            resource_path("orders", document_number),
            body=envelope("Order", order, UpdateOrder),  # noqa: F405
            response_model=OrderResponse,  # noqa: F405
        )
        return response.order

    # Invoice endpoints

    async def list_invoices(
        self, params: OrderQueryParams | Mapping[str, Any] | None = None
    ) -> ListInvoicesResponse:  # noqa: F405
        """List or search invoices.

        Args:
            params: Filters and pagination

        Returns:
            Invoices and pagination meta information
        """
        return await self.request(
            "GET",
            "invoices",
            params=params,
            response_model=ListInvoicesResponse,  # noqa: F405
        )

    async def get_invoice(self, document_number: str | int) -> Invoice:  # noqa: F405
        """Get a specific invoice.

        Args:
            document_number: Invoice document number

        Returns:
            Invoice details
        """
        response = await self.request(
            "GET",
            resource_path("invoices", document_number),
            response_model=InvoiceResponse,  # noqa: F405
        )
        return response.invoice

    async def create_invoice(
        self, invoice: CreateInvoice | Mapping[str, Any]  # noqa: F405
    ) -> Invoice:  # noqa: F405
        """Create an invoice.

        Args:
            invoice: Invoice payload

        Returns:
            The created invoice
        """
        response = await self.request(
            "POST",
            "invoices",
            body=envelope("Invoice", invoice, CreateInvoice),  # noqa: F405
            response_model=InvoiceResponse,  # noqa: F405
        )
        return response.invoice

    async def update_invoice(
        self,
        document_number: str | int,
        invoice: UpdateInvoice | Mapping[str, Any],  # noqa: F405
    ) -> Invoice:  # noqa: F405
        """Update an invoice.

        Args:
            document_number: Invoice document number
            invoice: Fields to change

        Returns:
            The updated invoice
        """
        response = await self.request(
            "PUT",
            resource_path("invoices", document_number),
            body=envelope("Invoice", invoice, UpdateInvoice),  # noqa: F405
            response_model=InvoiceResponse,  # noqa: F405
        )
        return response.invoice

    # Article endpoints

    async def list_articles(
        self, params: ArticleQueryParams | Mapping[str, Any] | None = None
    ) -> ListArticlesResponse:  # noqa: F405
        """List or search articles.

        Args:
            params: Filters and pagination

        Returns:
            Articles and pagination meta information
        """
        return await self.request(
            "GET",
            "articles",
            params=params,
            response_model=ListArticlesResponse,  # noqa: F405
        )

    async def get_article(self, article_number: str) -> Article:  # noqa: F405
        """Get a specific article.

        Args:
            article_number: Article number

        Returns:
            Article details
        """
        response = await self.request(
            "GET",
            resource_path("articles", article_number),
            response_model=ArticleResponse,  # noqa: F405
        )
        return response.article

    async def create_article(
        self, article: CreateArticle | Mapping[str, Any]  # noqa: F405
    ) -> Article:  # noqa: F405
        """Create an article.

        Args:
            article: Article payload

        Returns:
            The created article
        """
        response = await self.request(
            "POST",
            "articles",
            body=envelope("Article", article, CreateArticle),  # noqa: F405
            response_model=ArticleResponse,  # noqa: F405
        )
        return response.article

    async def update_article(
        self,
        article_number: str,
        article: UpdateArticle | Mapping[str, Any],  # noqa: F405
    ) -> Article:  # noqa: F405
        """Update an article.

        Args:
            article_number: Article number
            article: Fields to change

        Returns:
            The updated article
        """
        response = await self.request(
            "PUT",
            resource_path("articles", article_number),
            body=envelope("Article", article, UpdateArticle),  # noqa: F405
            response_model=ArticleResponse,  # noqa: F405
        )
        return response.article

    async def delete_article(self, article_number: str) -> None:
        """Delete an article.

        Args:
            article_number: Article number
        """
        await self.request("DELETE", resource_path("articles", article_number))

    # Customer endpoints

    async def list_customers(
        self, params: CustomerQueryParams | Mapping[str, Any] | None = None
    ) -> ListCustomersResponse:  # noqa: F405
        """List or search customers.

        Args:
            params: Filters and pagination

        Returns:
            Customers and pagination meta information
        """
        return await self.request(
            "GET",
            "customers",
            params=params,
            response_model=ListCustomersResponse,  # noqa: F405
        )

    async def get_customer(self, customer_number: str) -> Customer:  # noqa: F405
        """Get a specific customer.

        Args:
            customer_number: Customer number

        Returns:
            Customer details
        """
        response = await self.request(
            "GET",
            resource_path("customers", customer_number),
            response_model=CustomerResponse,  # noqa: F405
        )
        return response.customer

    async def create_customer(
        self, customer: CreateCustomer | Mapping[str, Any]  # noqa: F405
    ) -> Customer:  # noqa: F405
        """Create a customer.

        Args:
            customer: Customer payload

        Returns:
            The created customer
        """
        response = await self.request(
            "POST",
            "customers",
            body=envelope("Customer", customer, CreateCustomer),  # noqa: F405
            response_model=CustomerResponse,  # noqa: F405
        )
        return response.customer

    async def update_customer(
        self,
        customer_number: str,
        customer: UpdateCustomer | Mapping[str, Any],  # noqa: F405
    ) -> Customer:  # noqa: F405
        """Update a customer.

        Args:
            customer_number: Customer number
            customer: Fields to change

        Returns:
            The updated customer
        """
        response = await self.request(
            "PUT",
            resource_path("customers", customer_number),
            body=envelope("Customer", customer, UpdateCustomer),  # noqa: F405
            response_model=CustomerResponse,  # noqa: F405
        )
        return response.customer

    async def delete_customer(self, customer_number: str) -> None:
        """Delete a customer.

        Args:
            customer_number: Customer number
        """
        await self.request("DELETE", resource_path("customers", customer_number))

    # Label endpoints

    async def list_labels(self) -> list[Label]:  # noqa: F405
        """Get all labels.

        Returns:
            List of labels
        """
        response = await self.request(
            "GET",
            "labels",
            response_model=ListLabelsResponse,  # noqa: F405
        )
        return response.labels

    async def create_label(self, description: str) -> Label:  # noqa: F405
        """Create a label.

        Args:
            description: Label text

        Returns:
            The created label
        """
        response = await self.request(
            "POST",
            "labels",
            body=envelope("Label", {"description": description}, LabelPayload),  # noqa: F405
            response_model=LabelResponse,  # noqa: F405
        )
        return response.label

    async def update_label(self, label_id: int, description: str) -> Label:  # noqa: F405
        """Rename a label.

        Args:
            label_id: Label id
            description: New label text

        Returns:
            The updated label
        """
        response = await self.request(
            "PUT",
            resource_path("labels", label_id),
            body=envelope("Label", {"description": description}, LabelPayload),  # noqa: F405
            response_model=LabelResponse,  # noqa: F405
        )
        return response.label

    async def delete_label(self, label_id: int) -> None:
        """Delete a label.

        Args:
            label_id: Label id
        """
        await self.request("DELETE", resource_path("labels", label_id))

    # Settings endpoints

    async def get_company_settings(self) -> CompanySettings:  # noqa: F405
        """Get the company's settings.

        Returns:
            Company settings
        """
        response = await self.request(
            "GET",
            "settings/company",
            response_model=CompanySettingsResponse,  # noqa: F405
        )
        return response.company_settings
