"""
Domain layer package.

Contains entities, declarative validation rules, port interfaces
and the failure taxonomy shared by every bounded context.
No framework imports, no IO, no side effects.
"""
