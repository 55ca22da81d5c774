"""Services Layer — orchestrates store IO around the pure core.

Invariants:
    - Services own the read-validate-write sequence; resolvers only translate
"""
