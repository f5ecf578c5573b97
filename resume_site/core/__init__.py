"""Core Layer — pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All functions are pure and deterministic (dates and URLs are passed in)

Design Decisions:
    - Functional core separated from the imperative shell: builders here, IO in services/
"""
