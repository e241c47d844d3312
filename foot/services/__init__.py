"""Services - imperative shell orchestrating repositories, mappers and core rules.

Invariants:
    - One service instance per request (bound to the request's AsyncSession)
    - Services own the commit: a request either persists all its changes or none
"""
