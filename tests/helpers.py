"""
Payload builders for API tests.

Faker is seeded so generated names and addresses are reproducible.
"""

from faker import Faker

fake = Faker()
Faker.seed(12345)


def customer_payload(**overrides: object) -> dict:
    payload = {
        "name": fake.name()[:100],
        "email": fake.free_email(),
        "address": fake.street_address()[:200],
    }
    payload.update(overrides)
    return payload


def product_payload(**overrides: object) -> dict:
    payload = {
        "name": fake.word().title(),
        "description": fake.sentence(nb_words=8),
        "price": "19.99",
        "stock": 5,
    }
    payload.update(overrides)
    return payload


def order_payload(customer_id: str, product_id: str, **overrides: object) -> dict:
    payload = {
        "customer_id": customer_id,
        "items": [{"product_id": product_id, "quantity": 2, "price": "10.50"}],
    }
    payload.update(overrides)
    return payload


def payment_payload(order_id: str, **overrides: object) -> dict:
    payload = {
        "order_id": order_id,
        "amount": "21.00",
        "status": 0,
        "method": 2,
        "tx_id": fake.uuid4(),
    }
    payload.update(overrides)
    return payload
