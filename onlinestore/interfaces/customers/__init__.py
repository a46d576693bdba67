"""
HTTP interface for the customers bounded context.
"""
