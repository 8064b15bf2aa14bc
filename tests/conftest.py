"""Pytest fixtures for FortnoxPy tests."""

from typing import Any

import pytest

from fortnoxpy import AsyncFortnoxClient, FortnoxClient


@pytest.fixture
def access_token() -> str:
    """Return a test access token."""
    return "test_access_token_12345"


@pytest.fixture
def client_secret() -> str:
    """Return a test client secret."""
    return "test_client_secret"


@pytest.fixture
def base_url() -> str:
    """Return the base API URL, without trailing slash."""
    return "https://api.fortnox.se/3"


@pytest.fixture
def sync_client(access_token: str, client_secret: str):
    """Create a sync FortnoxClient for testing."""
    client = FortnoxClient(access_token=access_token, client_secret=client_secret)
    yield client
    client.close()


@pytest.fixture
async def async_client(access_token: str, client_secret: str):
    """Create an async FortnoxClient for testing."""
    client = AsyncFortnoxClient(access_token=access_token, client_secret=client_secret)
    yield client
    await client.close()


@pytest.fixture
def mock_order() -> dict[str, Any]:
    """Return mock order data as Fortnox sends it."""
    return {
        "@url": "https://api.fortnox.se/3/orders/1",
        "CustomerNumber": "1",
        "CustomerName": "Test Kund AB",
        "DocumentNumber": "1",
        "OrderDate": "2024-03-18",
        "DeliveryDate": "",
        "CurrencyRate": "1",
        "Total": 1250,
        "Labels": [{"Id": 3, "Description": "web"}],
        "OrderRows": [
            {
                "AccountNumber": 3001,
                "ArticleNumber": 100,
                "Description": "Widget",
                "DeliveredQuantity": "2.00",
                "OrderedQuantity": "2.00",
                "Price": "500.00",
                "VAT": 25,
            }
        ],
    }


@pytest.fixture
def mock_invoice() -> dict[str, Any]:
    """Return mock invoice data."""
    return {
        "@url": "https://api.fortnox.se/3/invoices/1001",
        "DocumentNumber": "1001",
        "CustomerNumber": "1",
        "InvoiceDate": "2024-03-18",
        "DueDate": "2024-04-17",
        "Balance": "1250.00",
        "Booked": True,
        "OCR": "100113",
        "TotalVAT": 250,
        "InvoiceRows": [{"Description": "Widget", "Price": 500}],
    }


@pytest.fixture
def mock_article() -> dict[str, Any]:
    """Return mock article data."""
    return {
        "@url": "https://api.fortnox.se/3/articles/100",
        "ArticleNumber": "100",
        "Description": "Widget",
        "EAN": "7350000000001",
        "SalesPrice": "500",
        "QuantityInStock": 12,
        "VAT": "25",
        "Active": True,
    }


@pytest.fixture
def mock_customer() -> dict[str, Any]:
    """Return mock customer data."""
    return {
        "@url": "https://api.fortnox.se/3/customers/1",
        "CustomerNumber": 1,
        "Name": "Test Kund AB",
        "Email": "kund@example.com",
        "OrganisationNumber": "556000-0000",
        "SalesAccount": "3001",
        "VATType": "SEVAT",
        "DefaultDeliveryTypes": {"Invoice": "EMAIL", "Offer": "PRINT", "Order": "PRINT"},
        "Active": True,
    }


@pytest.fixture
def mock_meta() -> dict[str, Any]:
    """Return mock pagination meta information."""
    return {"@CurrentPage": 1, "@TotalPages": 1, "@TotalResources": 1}
