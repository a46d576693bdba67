"""
Orders bounded context: domain layer.

Orders placed by customers, each holding one or more line items.
"""
