"""
Tests for the customers API endpoints.

Routes run against a fresh in-memory repository per test.
Validates status codes, Location headers and problem responses.
"""

import logging
from unittest.mock import MagicMock
from uuid import UUID, uuid4

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from helpers import customer_payload

from onlinestore.domain.customers.entities import Customer
from onlinestore.domain.ports import EntityRepository
from onlinestore.infrastructure.customers.customer_repository import (
    InMemoryCustomerRepository,
)
from onlinestore.interfaces.customers.dependencies import get_customer_repository
from onlinestore.shared.errors.mapper import GENERIC_INTERNAL_DETAIL
from onlinestore.shared.errors.schemas import PROBLEM_MEDIA_TYPE
from onlinestore.shared.logging import TraceIdFilter

BASE = "/api/customers"


class TestCreateCustomer:
    """Tests for POST /api/customers."""

    def test_create_returns_201_with_location(self, client: TestClient) -> None:
        payload = customer_payload()
        response = client.post(BASE, json=payload)

        assert response.status_code == 201
        body = response.json()
        assert UUID(body["id"])
        assert response.headers["location"] == f"{BASE}/{body['id']}"
        assert {k: body[k] for k in ("name", "email", "address")} == payload

    def test_created_customer_is_retrievable(self, client: TestClient) -> None:
        created = client.post(BASE, json=customer_payload()).json()
        response = client.get(f"{BASE}/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_invalid_customer_reports_every_field(
        self, client: TestClient, customer_repository: InMemoryCustomerRepository
    ) -> None:
        response = client.post(BASE, json={"name": "", "email": "", "address": ""})

        assert response.status_code == 400
        assert response.headers["content-type"].startswith(PROBLEM_MEDIA_TYPE)
        body = response.json()
        assert body["title"] == "Validation Error"
        assert body["status"] == 400
        assert body["instance"] == BASE
        assert body["errors"] == {
            "Name": ["Name is required"],
            "Email": ["Email is required", "Email is invalid"],
            "Address": ["Address is required"],
        }
        assert body["traceId"] == response.headers["x-trace-id"]
        assert customer_repository.list() == []

    def test_null_fields_are_validation_errors(self, client: TestClient) -> None:
        """JSON null reaches the validator instead of failing parsing."""
        response = client.post(BASE, json=customer_payload(name=None))

        assert response.status_code == 400
        body = response.json()
        assert body["title"] == "Validation Error"
        assert body["errors"] == {"Name": ["Name is required"]}

    def test_all_null_customer(self, client: TestClient) -> None:
        response = client.post(BASE, json={"name": None, "email": None, "address": None})
        assert response.json()["errors"] == {
            "Name": ["Name is required"],
            "Email": ["Email is required", "Email is invalid"],
            "Address": ["Address is required"],
        }

    def test_malformed_email(self, client: TestClient) -> None:
        response = client.post(BASE, json=customer_payload(email="not-an-email"))
        assert response.status_code == 400
        assert response.json()["errors"] == {"Email": ["Email is invalid"]}

    def test_unparseable_body_is_bad_request(self, client: TestClient) -> None:
        response = client.post(
            BASE, content=b"{not json", headers={"content-type": "application/json"}
        )
        assert response.status_code == 400
        body = response.json()
        assert body["title"] == "Bad Request"
        assert "errors" not in body


class TestUpdateCustomer:
    """Tests for PUT /api/customers/{id}."""

    def test_update_returns_204(self, client: TestClient) -> None:
        created = client.post(BASE, json=customer_payload()).json()
        changes = customer_payload(address="99 New Rd")

        response = client.put(f"{BASE}/{created['id']}", json=changes)

        assert response.status_code == 204
        assert response.content == b""
        fetched = client.get(f"{BASE}/{created['id']}").json()
        assert fetched["address"] == "99 New Rd"
        assert fetched["id"] == created["id"]

    def test_update_unknown_is_404(self, client: TestClient) -> None:
        missing = uuid4()
        response = client.put(f"{BASE}/{missing}", json=customer_payload())
        assert response.status_code == 404
        assert response.json()["detail"] == f'Entity "Customer" ({missing}) was not found.'

    def test_invalid_update_of_unknown_id_is_validation_error(self, client: TestClient) -> None:
        response = client.put(f"{BASE}/{uuid4()}", json=customer_payload(name=""))
        assert response.status_code == 400
        assert response.json()["errors"] == {"Name": ["Name is required"]}

    def test_malformed_id_is_bad_request(self, client: TestClient) -> None:
        response = client.put(f"{BASE}/not-a-uuid", json=customer_payload())
        assert response.status_code == 400
        assert response.json()["title"] == "Bad Request"


class TestReadAndDeleteCustomers:
    """Tests for GET and DELETE."""

    def test_list_empty(self, client: TestClient) -> None:
        response = client.get(BASE)
        assert response.status_code == 200
        assert response.json() == []

    def test_list_returns_created(self, client: TestClient) -> None:
        first = client.post(BASE, json=customer_payload()).json()
        second = client.post(BASE, json=customer_payload()).json()
        assert client.get(BASE).json() == [first, second]

    def test_get_unknown_is_404(self, client: TestClient) -> None:
        response = client.get(f"{BASE}/{uuid4()}")
        assert response.status_code == 404
        assert response.json()["title"] == "Not Found"

    def test_delete_then_get_is_404(self, client: TestClient) -> None:
        created = client.post(BASE, json=customer_payload()).json()

        assert client.delete(f"{BASE}/{created['id']}").status_code == 204
        assert client.get(f"{BASE}/{created['id']}").status_code == 404
        assert client.delete(f"{BASE}/{created['id']}").status_code == 404


class TestRepositoryFaults:
    """Unexpected repository errors surface as 500 problem responses."""

    def test_fault_hidden_in_production(self, app: FastAPI) -> None:
        broken = MagicMock(spec=EntityRepository)
        broken.list.side_effect = RuntimeError("connection string leaked")
        app.dependency_overrides[get_customer_repository] = lambda: broken

        response = TestClient(app).get(BASE)

        assert response.status_code == 500
        body = response.json()
        assert body["title"] == "An error occurred while processing your request"
        assert "leaked" not in body["detail"]
        assert body["traceId"] == response.headers["x-trace-id"]

    def test_route_fault_keeps_trace_and_security_headers(
        self, app: FastAPI, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A fault raised while rendering the response is still traced."""
        broken = MagicMock(spec=EntityRepository)
        broken.list.return_value = [object()]
        app.dependency_overrides[get_customer_repository] = lambda: broken
        caplog.handler.addFilter(TraceIdFilter())

        with caplog.at_level(logging.ERROR, logger="onlinestore.shared.errors.mapper"):
            response = TestClient(app).get(BASE, headers={"X-Trace-Id": "fault-7"})

        assert response.status_code == 500
        assert response.headers["content-type"].startswith(PROBLEM_MEDIA_TYPE)
        assert response.headers["x-trace-id"] == "fault-7"
        assert response.headers["cache-control"] == "no-store"
        assert "content-security-policy" in response.headers
        assert response.json()["traceId"] == "fault-7"
        assert response.json()["detail"] == GENERIC_INTERNAL_DETAIL
        (record,) = caplog.records
        assert record.trace_id == "fault-7"
        assert record.exc_info[0] is AttributeError

    def test_seeded_repository_lists_sample_customers(self, app: FastAPI) -> None:
        seeded = InMemoryCustomerRepository(seed_sample_data=True)
        app.dependency_overrides[get_customer_repository] = lambda: seeded

        names = [c["name"] for c in TestClient(app).get(BASE).json()]

        assert names == ["John Doe", "Jane Smith", "Alice Johnson"]

    def test_stored_entity_is_customer(
        self, client: TestClient, customer_repository: InMemoryCustomerRepository
    ) -> None:
        client.post(BASE, json=customer_payload())
        (stored,) = customer_repository.list()
        assert isinstance(stored, Customer)
