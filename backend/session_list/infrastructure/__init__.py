"""Infrastructure Layer — database engine and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy failures leave this layer as core.errors.DatabaseError

Design Decisions:
    - Session manager wraps the raw engine with rollback + error mapping
"""
