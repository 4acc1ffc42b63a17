"""Services Layer — task operations over an explicitly passed database session.

Invariants:
    - One SQL statement per operation
    - Services never import from api/

Design Decisions:
    - Class per resource holding the session, instantiated per request
"""
