"""Core Layer — error types shared by the API and infrastructure layers.

Invariants:
    - No imports from api/ or infrastructure/ (core is the innermost layer)
"""
