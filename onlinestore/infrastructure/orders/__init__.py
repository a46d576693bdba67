"""
Infrastructure adapters for the orders bounded context.
"""
