"""Core Layer — pure resource model logic, no IO, no async, no logging.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - All functions are deterministic; only Resource setters mutate state

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
