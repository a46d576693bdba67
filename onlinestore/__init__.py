"""
OnlineStoreMVP: sample online store made of small CRUD services.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters). Each bounded context
can be mounted alone, mirroring one standalone service.

Bounded contexts:
    - catalog: Products offered by the store.
    - customers: Customer records.
    - orders: Orders placed by customers.
    - payments: Payments settling orders.

Layers:
    - domain: Entities, validation rule tables, ports (ABCs), errors.
    - application: Use cases (one per CRUD operation), DTOs.
    - infrastructure: In-memory repositories implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (errors, tracing, security, logging).
"""
