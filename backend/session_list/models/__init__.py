"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - Imported here so Base.metadata is populated before create_all / alembic autogenerate
"""

from session_list.models.session import ChatSession  # noqa: F401
