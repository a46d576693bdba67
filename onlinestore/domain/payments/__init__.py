"""
Payments bounded context: domain layer.
"""
