"""Services Layer — orchestration between the HTTP layer and repositories.

Invariants:
    - Services depend on core protocols, never on concrete repositories
"""
