"""API Layer - FastAPI routes, REST mappers and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes speak schemas, services speak domain; api/mappers.py sits between

Design Decisions:
    - Thin routes delegate to services
"""
