"""Database Metadata — SQLAlchemy declarative base shared by models and migrations.

Invariants:
    - One metadata object per process; tables registered by importing app.models
"""
