"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - JSON endpoints return structured JSON; page routes return rendered HTML

Design Decisions:
    - Thin routes delegate to services and core builders
"""
