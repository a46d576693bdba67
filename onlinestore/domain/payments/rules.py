"""
Validation rules for payments.
"""

from onlinestore.domain.validation import (
    FieldRule,
    Validator,
    greater_than,
    max_length,
    required,
)

PAYMENT_ORDER_REQUIRED = "Order id is required"
PAYMENT_AMOUNT_MUST_BE_POSITIVE = "Amount must be greater than 0"
PAYMENT_TX_ID_MAX_LENGTH = 100
PAYMENT_TX_ID_TOO_LONG = (
    f"Transaction id must not exceed {PAYMENT_TX_ID_MAX_LENGTH} characters"
)

PAYMENT_RULES = (
    FieldRule("OrderId", "order_id", required, PAYMENT_ORDER_REQUIRED),
    FieldRule("Amount", "amount", greater_than(0), PAYMENT_AMOUNT_MUST_BE_POSITIVE),
    FieldRule("TxId", "tx_id", max_length(PAYMENT_TX_ID_MAX_LENGTH), PAYMENT_TX_ID_TOO_LONG),
)

payment_validator = Validator(PAYMENT_RULES)
