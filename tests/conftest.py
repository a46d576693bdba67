"""
Shared fixtures for the online store test suite.

Every API test gets its own empty repositories, wired in through
FastAPI dependency overrides, and a clean rate limiter.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from onlinestore.core.config import Settings
from onlinestore.infrastructure.catalog.product_repository import InMemoryProductRepository
from onlinestore.infrastructure.customers.customer_repository import (
    InMemoryCustomerRepository,
)
from onlinestore.infrastructure.orders.order_repository import InMemoryOrderRepository
from onlinestore.infrastructure.payments.payment_repository import InMemoryPaymentRepository
from onlinestore.interfaces.catalog.dependencies import get_product_repository
from onlinestore.interfaces.customers.dependencies import get_customer_repository
from onlinestore.interfaces.orders.dependencies import get_order_repository
from onlinestore.interfaces.payments.dependencies import get_payment_repository
from onlinestore.main import create_app
from onlinestore.shared.security.rate_limiting import limiter


@pytest.fixture(autouse=True)
def reset_rate_limits() -> None:
    """Start every test with no recorded hits."""
    limiter.reset()


@pytest.fixture
def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()


@pytest.fixture
def customer_repository() -> InMemoryCustomerRepository:
    return InMemoryCustomerRepository()


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def payment_repository() -> InMemoryPaymentRepository:
    return InMemoryPaymentRepository()


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="Production", debug=False, seed_sample_data=False)


@pytest.fixture
def app(
    settings: Settings,
    product_repository: InMemoryProductRepository,
    customer_repository: InMemoryCustomerRepository,
    order_repository: InMemoryOrderRepository,
    payment_repository: InMemoryPaymentRepository,
) -> FastAPI:
    application = create_app(settings)
    application.dependency_overrides[get_product_repository] = lambda: product_repository
    application.dependency_overrides[get_customer_repository] = lambda: customer_repository
    application.dependency_overrides[get_order_repository] = lambda: order_repository
    application.dependency_overrides[get_payment_repository] = lambda: payment_repository
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
