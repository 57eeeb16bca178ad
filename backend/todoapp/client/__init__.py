"""Client Layer - HTTP sync layer and view state controller for the todo API.

Invariants:
    - client/ talks to the server only over HTTP; it never imports api/, services/ or infrastructure/
    - Shares core/ (title policy, errors) and schemas/ (wire contract) with the server
"""
