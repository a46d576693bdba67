"""
Tests for the generic use cases.

Use cases run against mocked repository ports; each test checks
orchestration (validation order, failure classification), not rules.
"""

import logging
from dataclasses import replace
from decimal import Decimal
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from onlinestore.application.create_entity import CreateEntityUseCase
from onlinestore.application.delete_entity import DeleteEntityUseCase
from onlinestore.application.get_entity import GetEntityUseCase
from onlinestore.application.list_entities import ListEntitiesUseCase
from onlinestore.application.update_entity import UpdateEntityUseCase
from onlinestore.domain.catalog.entities import PRODUCT_ENTITY, Product
from onlinestore.domain.catalog.rules import product_validator
from onlinestore.domain.errors import (
    NotFoundError,
    UnclassifiedError,
    ValidationFailedError,
)
from onlinestore.domain.ports import EntityRepository

VALID_PRODUCT = Product(name="Mug", description="Ceramic", price=Decimal("4.50"), stock=3)
INVALID_PRODUCT = Product(name="", description="Ceramic", price=Decimal("4.50"), stock=3)


@pytest.fixture
def repository() -> MagicMock:
    return MagicMock(spec=EntityRepository)


class TestCreateEntityUseCase:
    """Tests for CreateEntityUseCase."""

    def _use_case(self, repository: MagicMock) -> CreateEntityUseCase[Product]:
        return CreateEntityUseCase(
            entity_name=PRODUCT_ENTITY,
            repository=repository,
            validator=product_validator,
            resource_path="/api/products/",
        )

    def test_returns_entity_and_location(self, repository: MagicMock) -> None:
        new_id = uuid4()
        stored = replace(VALID_PRODUCT, id=new_id)
        repository.add.return_value = stored

        created = self._use_case(repository).execute(VALID_PRODUCT)

        repository.add.assert_called_once_with(VALID_PRODUCT)
        assert created.entity is stored
        assert created.location == f"/api/products/{new_id}"

    def test_invalid_candidate_never_reaches_repository(self, repository: MagicMock) -> None:
        with pytest.raises(ValidationFailedError) as exc_info:
            self._use_case(repository).execute(INVALID_PRODUCT)

        assert exc_info.value.errors == {"Name": ["Name is required"]}
        repository.add.assert_not_called()

    def test_repository_fault_is_unclassified(self, repository: MagicMock) -> None:
        repository.add.side_effect = OSError("store offline")

        with pytest.raises(UnclassifiedError) as exc_info:
            self._use_case(repository).execute(VALID_PRODUCT)

        assert exc_info.value.operation == "create Product"
        assert isinstance(exc_info.value.cause, OSError)

    def test_repository_fault_is_not_logged_by_use_case(
        self, repository: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        """The error mapper logs the fault once; the use case stays silent."""
        repository.add.side_effect = OSError("store offline")

        with caplog.at_level(logging.DEBUG, logger="onlinestore.application"):
            with pytest.raises(UnclassifiedError):
                self._use_case(repository).execute(VALID_PRODUCT)

        assert [r for r in caplog.records if r.name.startswith("onlinestore")] == []


class TestUpdateEntityUseCase:
    """Tests for UpdateEntityUseCase."""

    def _use_case(self, repository: MagicMock) -> UpdateEntityUseCase[Product]:
        return UpdateEntityUseCase(
            entity_name=PRODUCT_ENTITY,
            repository=repository,
            validator=product_validator,
        )

    def test_updates_existing(self, repository: MagicMock) -> None:
        entity_id = uuid4()
        repository.update.return_value = VALID_PRODUCT

        self._use_case(repository).execute(entity_id, VALID_PRODUCT)

        repository.update.assert_called_once_with(entity_id, VALID_PRODUCT)

    def test_unknown_id_is_not_found(self, repository: MagicMock) -> None:
        entity_id = uuid4()
        repository.update.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            self._use_case(repository).execute(entity_id, VALID_PRODUCT)

        assert str(entity_id) in exc_info.value.message

    def test_validation_runs_before_lookup(self, repository: MagicMock) -> None:
        repository.update.return_value = None

        with pytest.raises(ValidationFailedError):
            self._use_case(repository).execute(uuid4(), INVALID_PRODUCT)

        repository.update.assert_not_called()


class TestReadAndDeleteUseCases:
    """Tests for list, get and delete."""

    def test_list_empty_store(self, repository: MagicMock) -> None:
        repository.list.return_value = []
        use_case = ListEntitiesUseCase(entity_name=PRODUCT_ENTITY, repository=repository)
        assert use_case.execute() == []

    def test_get_missing_is_not_found(self, repository: MagicMock) -> None:
        repository.get.return_value = None
        use_case = GetEntityUseCase(entity_name=PRODUCT_ENTITY, repository=repository)
        with pytest.raises(NotFoundError):
            use_case.execute(uuid4())

    def test_get_returns_entity(self, repository: MagicMock) -> None:
        repository.get.return_value = VALID_PRODUCT
        use_case = GetEntityUseCase(entity_name=PRODUCT_ENTITY, repository=repository)
        assert use_case.execute(uuid4()) is VALID_PRODUCT

    def test_delete_missing_is_not_found(self, repository: MagicMock) -> None:
        repository.delete.return_value = False
        use_case = DeleteEntityUseCase(entity_name=PRODUCT_ENTITY, repository=repository)
        with pytest.raises(NotFoundError):
            use_case.execute(uuid4())

    def test_store_errors_pass_through_unwrapped(self, repository: MagicMock) -> None:
        missing = NotFoundError(PRODUCT_ENTITY, "x")
        repository.get.side_effect = missing
        use_case = GetEntityUseCase(entity_name=PRODUCT_ENTITY, repository=repository)
        with pytest.raises(NotFoundError) as exc_info:
            use_case.execute(uuid4())
        assert exc_info.value is missing
