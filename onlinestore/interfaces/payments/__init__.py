"""
HTTP interface for the payments bounded context.
"""
