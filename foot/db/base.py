"""SQLAlchemy Declarative Base - shared base class for all ORM entities.

Invariants:
    - All entities inherit from Base
    - Base is the single source of truth for table metadata

Design Decisions:
    - Separate file for Base: avoids circular imports between entity modules
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all Foot ORM entities."""
    pass
