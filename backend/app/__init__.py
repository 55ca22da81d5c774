"""Participation Application Package — GraphQL API over participant shares.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
