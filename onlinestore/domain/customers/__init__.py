"""
Customers bounded context: domain layer.
"""
