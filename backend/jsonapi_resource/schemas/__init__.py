"""Pydantic Schemas — wire shapes for JSON:API resource objects.

Invariants:
    - Schemas validate at system boundary (client payloads)
    - Schemas never replace core validation: a valid schema can still be an invalid Resource

Design Decisions:
    - Separate from core: schemas are wire contracts, core/resource is the domain model
"""
