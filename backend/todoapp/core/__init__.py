"""Core Layer - pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, db/ or client/
    - All functions are pure and deterministic

Design Decisions:
    - Shared by server and client: both apply the same title policy independently
"""
