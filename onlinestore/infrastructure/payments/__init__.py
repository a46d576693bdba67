"""
Infrastructure adapters for the payments bounded context.
"""
