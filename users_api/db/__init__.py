"""Database Infrastructure — SQLAlchemy Base and column types.

Invariants:
    - All tables hang off Base.metadata

Design Decisions:
    - aiosqlite driver: async SQLite, the store creates its file on first connect
"""
