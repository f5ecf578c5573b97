"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports services/ or api/
    - All external calls wrapped with timeout/error mapping

Design Decisions:
    - Thin wrappers over raw clients (httpx, Pillow) with their own error types
"""
