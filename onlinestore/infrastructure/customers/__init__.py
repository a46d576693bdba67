"""
Infrastructure adapters for the customers bounded context.
"""
