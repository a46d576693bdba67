"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer. Storage is in memory; each
repository owns its collection for the lifetime of the process.
"""
