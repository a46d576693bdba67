"""
Shared validation step for write use cases.
"""

from onlinestore.domain.errors import ValidationFailedError
from onlinestore.domain.validation import Validator, to_error_map


def ensure_valid(validator: Validator, candidate: object) -> None:
    """Raise ValidationFailedError when the candidate breaks any rule."""
    failures = validator.validate(candidate)
    if failures:
        raise ValidationFailedError(to_error_map(failures))
