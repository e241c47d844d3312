"""Repositories - async data access and entity <-> domain mapping.

Invariants:
    - Only this layer touches ORM entities and issues queries
    - Mappers here are the only converters allowed to perform lookups
"""
