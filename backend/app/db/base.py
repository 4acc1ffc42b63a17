"""SQLAlchemy Declarative Base — shared base class for the ORM models.

Invariants:
    - All models inherit from Base
    - Base.metadata is the single source of truth for table creation (startup + alembic)

Design Decisions:
    - Separate file for Base: models and infrastructure import it without importing each other
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all Task Tracker ORM models."""
    pass
