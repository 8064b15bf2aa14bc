"""Tests for synchronous Fortnox client."""

import json

import httpx
import pytest
import respx
from httpx import Response

from fortnoxpy import (
    ClientConfig,
    CustomerQueryParams,
    FortnoxClient,
    FortnoxDate,
    FortnoxRemoteError,
    FortnoxTransportError,
    FortnoxUnauthorizedError,
    OrderQueryParams,
)
from fortnoxpy.models import (
    CreateArticle,
    CreateCustomer,
    CreateInvoice,
    CreateInvoiceRow,
    CreateOrder,
    CreateOrderRow,
    UpdateOrder,
)


class TestClientInitialization:
    """Test client initialization."""

    def test_init_with_credentials(self, access_token, client_secret):
        """Test client initialization with credentials."""
        client = FortnoxClient(access_token=access_token, client_secret=client_secret)

        assert client.config.access_token == access_token
        assert client.config.base_url == "https://api.fortnox.se/3/"
        client.close()

    def test_init_without_credentials(self):
        """Test that missing credentials raise ValueError."""
        with pytest.raises(ValueError):
            FortnoxClient(access_token="token")

    def test_init_with_config(self):
        """Test client initialization with a config object."""
        config = ClientConfig(
            access_token="token",
            client_secret="secret",
            base_url="http://localhost:8080/3/",
            timeout=5.0,
        )
        client = FortnoxClient(config=config)

        assert client.config is config
        client.close()

    def test_context_manager(self, access_token, client_secret):
        """Test client as context manager."""
        with FortnoxClient(access_token=access_token, client_secret=client_secret) as client:
            assert client.client is not None

        assert client.client.is_closed

    def test_external_http_client_not_closed(self, access_token, client_secret):
        """Test that a caller supplied httpx client is left open."""
        http_client = httpx.Client()
        with FortnoxClient(
            access_token=access_token,
            client_secret=client_secret,
            http_client=http_client,
        ):
            pass

        assert not http_client.is_closed
        http_client.close()


class TestRequest:
    """Test the generic request method."""

    @respx.mock
    def test_auth_headers(self, sync_client, base_url, access_token, client_secret):
        """Test that credentials and JSON headers are sent."""
        route = respx.get(f"{base_url}/labels").mock(
            return_value=Response(200, json={"Labels": []})
        )

        sync_client.list_labels()

        request = route.calls.last.request
        assert request.headers["Access-Token"] == access_token
        assert request.headers["Client-Secret"] == client_secret
        assert request.headers["Accept"] == "application/json"
        assert request.headers["Content-Type"] == "application/json"

    @respx.mock
    def test_call_headers_override(self, sync_client, base_url):
        """Test that per-call headers win over the defaults."""
        route = respx.get(f"{base_url}/labels").mock(
            return_value=Response(200, json={"Labels": []})
        )

        sync_client.request("GET", "labels", headers={"Accept": "text/plain"})

        assert route.calls.last.request.headers["Accept"] == "text/plain"

    @respx.mock
    def test_get_sends_null_body(self, sync_client, base_url):
        """Test that requests without a body send JSON null."""
        route = respx.get(f"{base_url}/labels").mock(
            return_value=Response(200, json={"Labels": []})
        )

        result = sync_client.request("GET", "labels")

        assert result == {"Labels": []}
        assert route.calls.last.request.content == b"null"

    @respx.mock
    def test_config_headers(self, base_url):
        """Test that headers from the config are sent."""
        config = ClientConfig(
            access_token="token",
            client_secret="secret",
            headers={"X-Integration": "shop"},
        )
        route = respx.get(f"{base_url}/labels").mock(
            return_value=Response(200, json={"Labels": []})
        )

        with FortnoxClient(config=config) as client:
            client.list_labels()

        assert route.calls.last.request.headers["X-Integration"] == "shop"

    @respx.mock
    def test_transport_error(self, sync_client, base_url):
        """Test that connection failures raise FortnoxTransportError."""
        respx.get(f"{base_url}/orders").mock(side_effect=httpx.ConnectError)

        try:
            sync_client.list_orders()
            assert False, "Should have raised FortnoxTransportError"
        except FortnoxTransportError as e:
            assert isinstance(e.__cause__, httpx.ConnectError)

    @respx.mock
    def test_timeout(self, sync_client, base_url):
        """Test that timeouts raise FortnoxTransportError."""
        respx.get(f"{base_url}/orders").mock(side_effect=httpx.ReadTimeout)

        with pytest.raises(FortnoxTransportError):
            sync_client.request("GET", "orders", timeout=0.5)

    @respx.mock
    def test_unauthorized(self, sync_client, base_url):
        """Test 401 error handling."""
        respx.get(f"{base_url}/orders").mock(
            return_value=Response(
                401,
                json={
                    "ErrorInformation": {
                        "error": 1,
                        "message": "Invalid Access-Token",
                        "code": 2000311,
                    }
                },
            )
        )

        try:
            sync_client.list_orders()
            assert False, "Should have raised FortnoxUnauthorizedError"
        except FortnoxUnauthorizedError as e:
            assert e.status_code == 401

    @respx.mock
    def test_remote_error(self, sync_client, base_url):
        """Test that error envelopes raise FortnoxRemoteError."""
        respx.get(f"{base_url}/orders/999").mock(
            return_value=Response(
                404,
                json={
                    "ErrorInformation": {
                        "Error": 1,
                        "Message": "Kan inte hitta ordern.",
                        "Code": 2000434,
                    }
                },
            )
        )

        try:
            sync_client.get_order(999)
            assert False, "Should have raised FortnoxRemoteError"
        except FortnoxRemoteError as e:
            assert e.code == 2000434
            assert e.http_status == 404
            assert "Kan inte hitta ordern." in str(e)


class TestOrders:
    """Test order endpoints."""

    @respx.mock
    def test_list_orders(self, sync_client, base_url, mock_order, mock_meta):
        """Test listing orders with filters."""
        route = respx.get(f"{base_url}/orders").mock(
            return_value=Response(
                200, json={"Orders": [mock_order], "MetaInformation": mock_meta}
            )
        )

        result = sync_client.list_orders(OrderQueryParams(limit=10, filter="cancelled"))

        assert route.called
        params = route.calls.last.request.url.params
        assert params["limit"] == "10"
        assert params["filter"] == "cancelled"
        assert len(result.orders) == 1
        assert result.orders[0].document_number == "1"
        assert result.orders[0].total == 1250.0
        assert result.meta_information.total_resources == 1

    @respx.mock
    def test_list_orders_without_filter(self, sync_client, base_url):
        """Test that no query string is sent without filters."""
        route = respx.get(f"{base_url}/orders").mock(
            return_value=Response(200, json={"Orders": []})
        )

        result = sync_client.list_orders()

        assert route.calls.last.request.url.query == b""
        assert result.orders == []
        assert result.meta_information is None

    @respx.mock
    def test_get_order(self, sync_client, base_url, mock_order):
        """Test getting a single order."""
        route = respx.get(f"{base_url}/orders/1").mock(
            return_value=Response(200, json={"Order": mock_order})
        )

        order = sync_client.get_order(1)

        assert route.called
        assert order.customer_name == "Test Kund AB"
        assert order.order_date == FortnoxDate(2024, 3, 18)
        assert order.delivery_date.is_zero
        assert order.currency_rate == 1.0
        assert order.labels[0].id == 3
        row = order.order_rows[0]
        assert row.article_number == "100"
        assert row.price == 500.0
        assert row.vat == 25.0
        assert row.ordered_quantity == "2.00"

    @respx.mock
    def test_create_order(self, sync_client, base_url):
        """Test creating an order."""
        route = respx.post(f"{base_url}/orders").mock(
            return_value=Response(
                201,
                json={
                    "Order": {
                        "DocumentNumber": "2",
                        "CustomerNumber": "one",
                        "OrderDate": "2024-03-18",
                        "OrderRows": [
                            {
                                "AccountNumber": None,
                                "ArticleNumber": "",
                                "CostCenter": None,
                                "Description": "Desc Text",
                                "Price": 0,
                            }
                        ],
                    }
                },
            )
        )

        order = sync_client.create_order(
            CreateOrder(
                customer_number="one",
                order_rows=[CreateOrderRow(description="Desc Text")],
            )
        )

        assert json.loads(route.calls.last.request.content) == {
            "Order": {"CustomerNumber": "one", "OrderRows": [{"Description": "Desc Text"}]}
        }
        assert len(order.order_rows) == 1
        assert order.order_rows[0].description == "Desc Text"
        assert order.order_rows[0].account_number == 0
        assert order.order_rows[0].cost_center == ""

    @respx.mock
    def test_create_order_from_mapping(self, sync_client, base_url, mock_order):
        """Test creating an order from a plain mapping."""
        route = respx.post(f"{base_url}/orders").mock(
            return_value=Response(201, json={"Order": mock_order})
        )

        sync_client.create_order(
            {"customer_number": "1", "order_date": FortnoxDate(2024, 3, 18)}
        )

        assert json.loads(route.calls.last.request.content) == {
            "Order": {"CustomerNumber": "1", "OrderDate": "2024-03-18"}
        }

    @respx.mock
    def test_update_order(self, sync_client, base_url, mock_order):
        """Test updating an order."""
        route = respx.put(f"{base_url}/orders/1").mock(
            return_value=Response(200, json={"Order": mock_order})
        )

        order = sync_client.update_order(1, UpdateOrder(remarks="Leave at the door"))

        assert route.called
        assert json.loads(route.calls.last.request.content) == {
            "Order": {"Remarks": "Leave at the door"}
        }
        assert order.document_number == "1"


class TestInvoices:
    """Test invoice endpoints."""

    @respx.mock
    def test_list_invoices(self, sync_client, base_url, mock_invoice, mock_meta):
        """Test listing invoices."""
        route = respx.get(f"{base_url}/invoices").mock(
            return_value=Response(
                200, json={"Invoices": [mock_invoice], "MetaInformation": mock_meta}
            )
        )

        result = sync_client.list_invoices(OrderQueryParams(page=2))

        assert route.calls.last.request.url.params["page"] == "2"
        assert result.invoices[0].document_number == 1001
        assert result.invoices[0].balance == 1250.0
        assert result.invoices[0].ocr == "100113"

    @respx.mock
    def test_get_invoice(self, sync_client, base_url, mock_invoice):
        """Test getting a single invoice."""
        respx.get(f"{base_url}/invoices/1001").mock(
            return_value=Response(200, json={"Invoice": mock_invoice})
        )

        invoice = sync_client.get_invoice(1001)

        assert invoice.booked is True
        assert invoice.total_vat == 250.0
        assert invoice.due_date == FortnoxDate(2024, 4, 17)
        assert invoice.invoice_rows[0].price == 500.0

    @respx.mock
    def test_create_invoice(self, sync_client, base_url, mock_invoice):
        """Test creating an invoice."""
        route = respx.post(f"{base_url}/invoices").mock(
            return_value=Response(201, json={"Invoice": mock_invoice})
        )

        invoice = sync_client.create_invoice(
            CreateInvoice(
                customer_number="1",
                invoice_rows=[CreateInvoiceRow(article_number="100", price=500)],
            )
        )

        assert json.loads(route.calls.last.request.content) == {
            "Invoice": {
                "CustomerNumber": "1",
                "InvoiceRows": [{"ArticleNumber": "100", "Price": 500.0}],
            }
        }
        assert invoice.document_number == 1001

    @respx.mock
    def test_update_invoice(self, sync_client, base_url, mock_invoice):
        """Test updating an invoice."""
        route = respx.put(f"{base_url}/invoices/1001").mock(
            return_value=Response(200, json={"Invoice": mock_invoice})
        )

        sync_client.update_invoice(1001, {"our_reference": "Anna"})

        assert json.loads(route.calls.last.request.content) == {
            "Invoice": {"OurReference": "Anna"}
        }


class TestArticles:
    """Test article endpoints."""

    @respx.mock
    def test_list_articles(self, sync_client, base_url, mock_article, mock_meta):
        """Test listing articles."""
        respx.get(f"{base_url}/articles").mock(
            return_value=Response(
                200, json={"Articles": [mock_article], "MetaInformation": mock_meta}
            )
        )

        result = sync_client.list_articles()

        article = result.articles[0]
        assert article.article_number == "100"
        assert article.ean == "7350000000001"
        assert article.sales_price == 500.0
        assert article.vat == 25.0

    @respx.mock
    def test_get_article(self, sync_client, base_url, mock_article):
        """Test getting a single article."""
        respx.get(f"{base_url}/articles/100").mock(
            return_value=Response(200, json={"Article": mock_article})
        )

        article = sync_client.get_article("100")

        assert article.quantity_in_stock == 12.0
        assert article.active is True

    @respx.mock
    def test_create_article(self, sync_client, base_url, mock_article):
        """Test creating an article."""
        route = respx.post(f"{base_url}/articles").mock(
            return_value=Response(201, json={"Article": mock_article})
        )

        sync_client.create_article(CreateArticle(description="Widget", ean="7350000000001"))

        assert json.loads(route.calls.last.request.content) == {
            "Article": {"Description": "Widget", "EAN": "7350000000001"}
        }

    @respx.mock
    def test_update_article(self, sync_client, base_url, mock_article):
        """Test updating an article."""
        route = respx.put(f"{base_url}/articles/100").mock(
            return_value=Response(200, json={"Article": mock_article})
        )

        article = sync_client.update_article("100", {"description": "Widget"})

        assert route.called
        assert article.description == "Widget"

    @respx.mock
    def test_delete_article(self, sync_client, base_url):
        """Test deleting an article."""
        route = respx.delete(f"{base_url}/articles/100").mock(return_value=Response(204))

        result = sync_client.delete_article("100")

        assert result is None
        assert route.calls.last.request.content == b""


class TestCustomers:
    """Test customer endpoints."""

    @respx.mock
    def test_list_customers(self, sync_client, base_url, mock_customer, mock_meta):
        """Test listing customers."""
        route = respx.get(f"{base_url}/customers").mock(
            return_value=Response(
                200, json={"Customers": [mock_customer], "MetaInformation": mock_meta}
            )
        )

        result = sync_client.list_customers(CustomerQueryParams(name="Test"))

        assert route.calls.last.request.url.params["name"] == "Test"
        assert result.customers[0].customer_number == "1"

    @respx.mock
    def test_get_customer(self, sync_client, base_url, mock_customer):
        """Test getting a single customer."""
        respx.get(f"{base_url}/customers/1").mock(
            return_value=Response(200, json={"Customer": mock_customer})
        )

        customer = sync_client.get_customer("1")

        assert customer.name == "Test Kund AB"
        assert customer.sales_account == 3001
        assert customer.vat_type == "SEVAT"
        assert customer.default_delivery_types.invoice == "EMAIL"

    @respx.mock
    def test_create_customer(self, sync_client, base_url, mock_customer):
        """Test creating a customer."""
        route = respx.post(f"{base_url}/customers").mock(
            return_value=Response(201, json={"Customer": mock_customer})
        )

        sync_client.create_customer(CreateCustomer(name="Test Kund AB", vat_type="SEVAT"))

        assert json.loads(route.calls.last.request.content) == {
            "Customer": {"Name": "Test Kund AB", "VATType": "SEVAT"}
        }

    @respx.mock
    def test_update_customer(self, sync_client, base_url, mock_customer):
        """Test updating a customer."""
        route = respx.put(f"{base_url}/customers/1").mock(
            return_value=Response(200, json={"Customer": mock_customer})
        )

        sync_client.update_customer("1", {"email": "kund@example.com"})

        assert json.loads(route.calls.last.request.content) == {
            "Customer": {"Email": "kund@example.com"}
        }

    @respx.mock
    def test_delete_customer(self, sync_client, base_url):
        """Test deleting a customer."""
        route = respx.delete(f"{base_url}/customers/1").mock(return_value=Response(204))

        assert sync_client.delete_customer("1") is None
        assert route.called


class TestLabels:
    """Test label endpoints."""

    @respx.mock
    def test_list_labels(self, sync_client, base_url):
        """Test listing labels."""
        respx.get(f"{base_url}/labels").mock(
            return_value=Response(
                200,
                json={"Labels": [{"Id": 1, "Description": "web"}, {"Id": "2", "Description": "b2b"}]},
            )
        )

        labels = sync_client.list_labels()

        assert [label.id for label in labels] == [1, 2]
        assert labels[1].description == "b2b"

    @respx.mock
    def test_create_label(self, sync_client, base_url):
        """Test creating a label."""
        route = respx.post(f"{base_url}/labels").mock(
            return_value=Response(201, json={"Label": {"Id": 7, "Description": "web"}})
        )

        label = sync_client.create_label("web")

        assert json.loads(route.calls.last.request.content) == {"Label": {"Description": "web"}}
        assert label.id == 7

    @respx.mock
    def test_update_label(self, sync_client, base_url):
        """Test renaming a label."""
        route = respx.put(f"{base_url}/labels/7").mock(
            return_value=Response(200, json={"Label": {"Id": 7, "Description": "shop"}})
        )

        label = sync_client.update_label(7, "shop")

        assert route.called
        assert label.description == "shop"

    @respx.mock
    def test_delete_label(self, sync_client, base_url):
        """Test deleting a label."""
        route = respx.delete(f"{base_url}/labels/7").mock(return_value=Response(204))

        assert sync_client.delete_label(7) is None
        assert route.called


class TestCompanySettings:
    """Test settings endpoints."""

    @respx.mock
    def test_get_company_settings(self, sync_client, base_url):
        """Test getting the company settings."""
        respx.get(f"{base_url}/settings/company").mock(
            return_value=Response(
                200,
                json={
                    "CompanySettings": {
                        "Name": "Test AB",
                        "OrganizationNumber": "556000-0000",
                        "DatabaseNumber": "12345",
                        "VATNumber": "SE556000000001",
                        "WWW": "https://example.com",
                    }
                },
            )
        )

        settings = sync_client.get_company_settings()

        assert settings.name == "Test AB"
        assert settings.database_number == 12345
        assert settings.vat_number == "SE556000000001"
        assert settings.www == "https://example.com"
