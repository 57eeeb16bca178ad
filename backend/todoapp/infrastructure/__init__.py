"""Infrastructure Layer - database session management and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or client/
    - All SQLAlchemy failures mapped to DatabaseError (core/errors.py)
"""
