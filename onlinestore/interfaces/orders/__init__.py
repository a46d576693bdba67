"""
HTTP interface for the orders bounded context.
"""
