"""API Layer — GraphQL schema, FastAPI routes, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Thin resolvers and routes delegate to services
"""
