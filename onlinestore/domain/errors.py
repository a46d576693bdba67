"""
Domain failures shared by all bounded contexts.

The four failure kinds below form a closed set. Use cases raise them;
the interface layer maps them to HTTP responses through the ErrorMapper.
No framework imports allowed.
"""

from typing import Union

VALIDATION_FAILED_MESSAGE = "One or more validation failures have occurred."


class StoreError(Exception):
    """Base error for all online store failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class NotFoundError(StoreError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity: str, key: object) -> None:
        super().__init__(f'Entity "{entity}" ({key}) was not found.')
        self.entity = entity
        self.key = key


class BadRequestError(StoreError):
    """Raised for malformed requests not covered by field validation."""


class ValidationFailedError(StoreError):
    """Raised when a candidate entity violates one or more field rules.

    Attributes:
        errors: Field name mapped to its failure messages, in rule order.
    """

    def __init__(self, errors: dict[str, list[str]]) -> None:
        super().__init__(VALIDATION_FAILED_MESSAGE)
        self.errors = errors


class UnclassifiedError(StoreError):
    """Wraps an unexpected fault raised by a collaborator.

    Attributes:
        operation: Name of the operation that was running.
        cause: The original exception.
    """

    def __init__(self, operation: str, cause: BaseException) -> None:
        super().__init__(
            f"Unhandled failure during {operation}: {type(cause).__name__}: {cause}"
        )
        self.operation = operation
        self.cause = cause


Failure = Union[NotFoundError, BadRequestError, ValidationFailedError, UnclassifiedError]
