"""Create chat_sessions table.

Revision ID: 001_chat_sessions
Revises:
Create Date: 2026-10-18

One row per chat session listed in the session list: title, timestamps,
starred flag, and optional project/directive links.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_chat_sessions'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'chat_sessions',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('title', sa.String(256), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('project_id', sa.String(36), nullable=True),
        sa.Column('directive_id', sa.String(36), nullable=True),
        sa.Column('is_starred', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_chat_sessions')),
    )
    op.create_index(
        op.f('ix_chat_sessions_created_at'), 'chat_sessions', ['created_at'],
    )


def downgrade() -> None:
    op.drop_index(op.f('ix_chat_sessions_created_at'), table_name='chat_sessions')
    op.drop_table('chat_sessions')
