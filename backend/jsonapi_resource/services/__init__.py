"""Services Layer — glue between wire payloads, settings and the core resource model.

Invariants:
    - Services may log and read settings; core/ may not
    - Client-data failures stay 400-level; adapter-data failures become internal errors
"""
