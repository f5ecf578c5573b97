"""Services Layer — content loading, contact submission and page assembly.

Invariants:
    - Services own IO and state; they delegate rules to core/
    - Collaborators are injected (provider, relay), never looked up globally
"""
