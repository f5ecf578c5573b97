"""Pydantic Schemas — validation of resume content and contact submissions.

Invariants:
    - Schemas validate at system boundary (content file, form posts, relay payloads)
    - Models are frozen once validated

Design Decisions:
    - Resume fields keep their camelCase names on the wire via aliases
"""
