"""
Validation rules for orders.

Item rules check every line; one failing line reports the rule once.
"""

from onlinestore.domain.validation import (
    FieldRule,
    Validator,
    each_item,
    greater_than,
    not_empty_collection,
    required,
)

ORDER_CUSTOMER_REQUIRED = "Customer id is required"
ORDER_ITEMS_REQUIRED = "Order must contain at least one item"
ORDER_ITEM_PRODUCT_REQUIRED = "Each item must reference a product"
ORDER_ITEM_QUANTITY_MUST_BE_POSITIVE = "Item quantity must be greater than 0"
ORDER_ITEM_PRICE_MUST_BE_POSITIVE = "Item price must be greater than 0"

ORDER_RULES = (
    FieldRule("CustomerId", "customer_id", required, ORDER_CUSTOMER_REQUIRED),
    FieldRule("Items", "items", not_empty_collection, ORDER_ITEMS_REQUIRED),
    FieldRule("Items", "items", each_item("product_id", required), ORDER_ITEM_PRODUCT_REQUIRED),
    FieldRule(
        "Items",
        "items",
        each_item("quantity", greater_than(0)),
        ORDER_ITEM_QUANTITY_MUST_BE_POSITIVE,
    ),
    FieldRule(
        "Items",
        "items",
        each_item("price", greater_than(0)),
        ORDER_ITEM_PRICE_MUST_BE_POSITIVE,
    ),
)

order_validator = Validator(ORDER_RULES)
