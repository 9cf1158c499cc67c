"""Infrastructure Layer — database access, seeding and observability.

Invariants:
    - Infrastructure implements core protocols, never the other way round
    - Every connection acquired here is released on every exit path
"""
