"""
Validation rules for catalog products.

Messages and limits are a static catalog; the rule table is evaluated
by the shared Validator.
"""

from onlinestore.domain.validation import (
    FieldRule,
    Validator,
    greater_than,
    greater_than_or_equal,
    max_length,
    required,
)

# Name
PRODUCT_NAME_REQUIRED = "Name is required"
PRODUCT_NAME_MAX_LENGTH = 100
PRODUCT_NAME_TOO_LONG = f"Name cannot exceed {PRODUCT_NAME_MAX_LENGTH} characters"

# Description
PRODUCT_DESCRIPTION_REQUIRED = "Description is required"
PRODUCT_DESCRIPTION_MAX_LENGTH = 500
PRODUCT_DESCRIPTION_TOO_LONG = (
    f"Description cannot exceed {PRODUCT_DESCRIPTION_MAX_LENGTH} characters"
)

# Price
PRODUCT_PRICE_MUST_BE_GREATER_THAN_ZERO = "Price must be greater than 0"

# Stock
PRODUCT_STOCK_MUST_BE_NON_NEGATIVE = "Stock must be non-negative"

PRODUCT_RULES = (
    FieldRule("Name", "name", required, PRODUCT_NAME_REQUIRED),
    FieldRule("Name", "name", max_length(PRODUCT_NAME_MAX_LENGTH), PRODUCT_NAME_TOO_LONG),
    FieldRule("Description", "description", required, PRODUCT_DESCRIPTION_REQUIRED),
    FieldRule(
        "Description",
        "description",
        max_length(PRODUCT_DESCRIPTION_MAX_LENGTH),
        PRODUCT_DESCRIPTION_TOO_LONG,
    ),
    FieldRule("Price", "price", greater_than(0), PRODUCT_PRICE_MUST_BE_GREATER_THAN_ZERO),
    FieldRule("Stock", "stock", greater_than_or_equal(0), PRODUCT_STOCK_MUST_BE_NON_NEGATIVE),
)

product_validator = Validator(PRODUCT_RULES)
