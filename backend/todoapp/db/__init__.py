"""Database Metadata - SQLAlchemy declarative Base.

Invariants:
    - Schema is created from Base.metadata at startup (no migrations: store is non-durable)
"""
