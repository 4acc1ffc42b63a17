"""Infrastructure Layer — storage engine access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every storage failure leaves this layer as a DatabaseError

Design Decisions:
    - Database (engine, sessions) and observability (logging) are the only shell resources
"""
