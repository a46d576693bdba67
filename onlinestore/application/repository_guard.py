"""
Classification of repository faults.

Repository calls run inside ``repository_call``: recognized store
failures pass through untouched, anything else is wrapped into an
UnclassifiedError so no fault leaves a use case unmapped.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from onlinestore.domain.errors import StoreError, UnclassifiedError


@contextmanager
def repository_call(operation: str) -> Iterator[None]:
    """Wrap unexpected repository exceptions for ``operation``.

    Raises:
        UnclassifiedError: If the wrapped block raises anything other
            than a StoreError.
    """
    try:
        yield
    except StoreError:
        raise
    except Exception as exc:
        raise UnclassifiedError(operation, exc) from exc
