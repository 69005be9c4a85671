"""Declarative Base — metadata shared by the ORM models and alembic.

Invariants:
    - Every table is declared on Base.metadata
    - Index and constraint names follow one naming convention, so alembic
      migrations can drop them by name on every backend

Design Decisions:
    - Own module: models, the session manager and alembic/env.py import it
      without pulling in each other
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
