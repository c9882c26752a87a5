"""API Layer — JSON route, response middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Response middleware applies to every route, static assets included
"""
