"""Services Layer - imperative shell around the store.

Invariants:
    - Services own all database IO; routes only orchestrate
"""
