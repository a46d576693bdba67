"""
Validation rules for customers.
"""

from onlinestore.domain.validation import (
    FieldRule,
    Validator,
    email_address,
    max_length,
    required,
)

# Name
CUSTOMER_NAME_REQUIRED = "Name is required"
CUSTOMER_NAME_MAX_LENGTH = 100
CUSTOMER_NAME_TOO_LONG = f"Name must not exceed {CUSTOMER_NAME_MAX_LENGTH} characters"

# Email
CUSTOMER_EMAIL_REQUIRED = "Email is required"
CUSTOMER_EMAIL_INVALID = "Email is invalid"

# Address
CUSTOMER_ADDRESS_REQUIRED = "Address is required"
CUSTOMER_ADDRESS_MAX_LENGTH = 200
CUSTOMER_ADDRESS_TOO_LONG = (
    f"Address must not exceed {CUSTOMER_ADDRESS_MAX_LENGTH} characters"
)

CUSTOMER_RULES = (
    FieldRule("Name", "name", required, CUSTOMER_NAME_REQUIRED),
    FieldRule("Name", "name", max_length(CUSTOMER_NAME_MAX_LENGTH), CUSTOMER_NAME_TOO_LONG),
    FieldRule("Email", "email", required, CUSTOMER_EMAIL_REQUIRED),
    FieldRule("Email", "email", email_address, CUSTOMER_EMAIL_INVALID),
    FieldRule("Address", "address", required, CUSTOMER_ADDRESS_REQUIRED),
    FieldRule(
        "Address",
        "address",
        max_length(CUSTOMER_ADDRESS_MAX_LENGTH),
        CUSTOMER_ADDRESS_TOO_LONG,
    ),
)

customer_validator = Validator(CUSTOMER_RULES)
