"""
Catalog bounded context: domain layer.

Products offered by the store and the rules a product must satisfy.
"""
