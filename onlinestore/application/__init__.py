"""
Application layer package.

Contains use cases that orchestrate validation and repository calls.
Each use case is a single class with one public method and is generic
over the entity type, so every bounded context shares the same
request-handling semantics.
This layer depends on domain ports, never on infrastructure.
"""
