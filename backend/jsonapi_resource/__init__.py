"""JSON:API Resource Package — resource model, validation and serialization.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Explicit imports only, no star exports; the root exposes just the version
"""

__version__ = "1.0.0"
