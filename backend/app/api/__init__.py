"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every failure leaves this layer as a JSON envelope with an "error" message

Design Decisions:
    - Thin routes delegate to services (ADR: ExMA impureim sandwich)
"""
