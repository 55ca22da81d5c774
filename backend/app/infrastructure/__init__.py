"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - All store exceptions mapped to DatabaseError before leaving this layer
"""
