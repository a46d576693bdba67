"""
Declarative field validation.

Each entity declares an ordered table of FieldRule entries. A Validator
evaluates every rule independently and collects all failures, so a
single call reports every violated field. Adding a field or an entity
means extending a table, not editing control flow.

Validators are pure: they never raise and never mutate the candidate.
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any
from uuid import UUID

from email_validator import EmailNotValidError, validate_email

Check = Callable[[Any], bool]


@dataclass(frozen=True)
class FieldRule:
    """A single (predicate, message) pair bound to an entity attribute.

    Attributes:
        field: Field name reported in failures (e.g. "Name").
        attribute: Attribute read from the candidate (e.g. "name").
        check: Predicate returning True when the value is acceptable.
        message: Fixed message reported when the predicate fails.
    """

    field: str
    attribute: str
    check: Check
    message: str


@dataclass(frozen=True)
class FieldFailure:
    """A single rule violation for one field."""

    field: str
    message: str


class Validator:
    """Evaluates an ordered rule table against candidate entities."""

    def __init__(self, rules: Sequence[FieldRule]) -> None:
        self._rules = tuple(rules)

    def validate(self, candidate: object) -> list[FieldFailure]:
        """Return every failure for the candidate, grouped by field.

        Fields appear in the order they are first declared; within a
        field, failures follow rule declaration order. An empty list
        means the candidate is valid.
        """
        grouped: dict[str, list[FieldFailure]] = {}
        for rule in self._rules:
            value = getattr(candidate, rule.attribute, None)
            bucket = grouped.setdefault(rule.field, [])
            if not _passes(rule.check, value):
                bucket.append(FieldFailure(field=rule.field, message=rule.message))
        return [failure for bucket in grouped.values() for failure in bucket]

    def is_valid(self, candidate: object) -> bool:
        return not self.validate(candidate)


def _passes(check: Check, value: Any) -> bool:
    try:
        return bool(check(value))
    except (TypeError, ValueError, ArithmeticError):
        return False


def to_error_map(failures: Iterable[FieldFailure]) -> dict[str, list[str]]:
    """Group failures into a field -> messages mapping, preserving order."""
    errors: dict[str, list[str]] = {}
    for failure in failures:
        errors.setdefault(failure.field, []).append(failure.message)
    return errors


# ── Predicates ───────────────────────────────────────────────────


def required(value: Any) -> bool:
    """Value is present: not None, not blank, not the nil UUID."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, UUID):
        return value.int != 0
    return True


def max_length(limit: int) -> Check:
    """Value, when present, has at most ``limit`` characters."""

    def check(value: Any) -> bool:
        return value is None or len(value) <= limit

    return check


def email_address(value: Any) -> bool:
    """Value is a syntactically valid email address (no DNS lookups)."""
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _as_decimal(value: Any) -> Decimal:
    if value is None or isinstance(value, bool):
        raise TypeError("not a number")
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(str(value)) from exc


def greater_than(bound: int | Decimal) -> Check:
    def check(value: Any) -> bool:
        return _as_decimal(value) > Decimal(bound)

    return check


def greater_than_or_equal(bound: int | Decimal) -> Check:
    def check(value: Any) -> bool:
        return _as_decimal(value) >= Decimal(bound)

    return check


def not_empty_collection(value: Any) -> bool:
    return value is not None and len(value) > 0


def each_item(attribute: str, check: Check) -> Check:
    """Every element of a collection has an acceptable ``attribute``.

    An empty or missing collection passes; pair with not_empty_collection
    when at least one element is required.
    """

    def check_all(value: Any) -> bool:
        return all(_passes(check, getattr(item, attribute, None)) for item in value or ())

    return check_all
