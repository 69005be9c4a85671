"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - One declarative Base for every table; sessions come from infrastructure/database.py

Design Decisions:
    - aiosqlite for local/desktop use, asyncpg when DATABASE_URL points at PostgreSQL
"""
