"""Core Layer — task rules, domain types, and the error hierarchy. No IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Validation runs here before any statement reaches the storage engine

Design Decisions:
    - Functional core separated from imperative shell (ADR: ExMA impureim sandwich)
"""
