"""Alembic environment — runs session list migrations on the async engine.

Invariants:
    - Target metadata is session_list's Base.metadata with every model registered
    - The database URL comes from Settings (DATABASE_URL / .env), so the same
      postgresql:// → postgresql+asyncpg:// rewrite applies as in the app;
      alembic.ini's sqlalchemy.url is used only when no override is set

Design Decisions:
    - NullPool: a migration run opens one connection and exits
"""

import asyncio
import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from session_list import models  # noqa: F401  registers tables on Base.metadata
from session_list.config import Settings
from session_list.db.base import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _database_url() -> str:
    if "DATABASE_URL" in os.environ:
        return Settings().database_url
    return config.get_main_option("sqlalchemy.url")


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=target_metadata,
        render_as_batch=True,  # SQLite needs batch mode for ALTER
        **kwargs,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_offline() -> None:
    _configure(
        url=_database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )


async def run_migrations_online() -> None:
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = _database_url()
    engine = async_engine_from_config(
        section, prefix="sqlalchemy.", poolclass=pool.NullPool,
    )

    def _run(connection: Connection) -> None:
        _configure(connection=connection)

    async with engine.connect() as connection:
        await connection.run_sync(_run)
    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
