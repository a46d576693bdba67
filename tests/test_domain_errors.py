"""
Tests for the domain failure kinds.
"""

from uuid import UUID

from onlinestore.domain.errors import (
    VALIDATION_FAILED_MESSAGE,
    BadRequestError,
    NotFoundError,
    StoreError,
    UnclassifiedError,
    ValidationFailedError,
)


class TestFailureKinds:
    """Tests for messages and attributes of each failure."""

    def test_not_found_message_names_entity_and_key(self) -> None:
        key = UUID("6dbad659-57f9-4639-b7b6-d7ef1c75321a")
        error = NotFoundError("Product", key)
        assert error.message == f'Entity "Product" ({key}) was not found.'
        assert error.entity == "Product"
        assert error.key == key

    def test_validation_failed_carries_errors(self) -> None:
        error = ValidationFailedError({"Name": ["Name is required"]})
        assert error.message == VALIDATION_FAILED_MESSAGE
        assert error.errors == {"Name": ["Name is required"]}

    def test_unclassified_wraps_cause(self) -> None:
        cause = RuntimeError("disk on fire")
        error = UnclassifiedError("create Customer", cause)
        assert error.cause is cause
        assert error.operation == "create Customer"
        assert "RuntimeError: disk on fire" in error.message

    def test_all_kinds_are_store_errors(self) -> None:
        for error in (
            NotFoundError("Order", "x"),
            BadRequestError("bad"),
            ValidationFailedError({}),
            UnclassifiedError("op", ValueError()),
        ):
            assert isinstance(error, StoreError)
            assert str(error) == error.message
