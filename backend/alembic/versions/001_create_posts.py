"""Create posts table.

Revision ID: 001_create_posts
Revises:
Create Date: 2026-10-18

posts(id, title, content, user_id, created_at) with server-side uuid and
timestamp defaults, so rows inserted outside the API get them too.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_create_posts'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'posts',
        sa.Column(
            'id', sa.Uuid(), primary_key=True,
            server_default=sa.text('gen_random_uuid()'),
        ),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column(
            'created_at', sa.DateTime(timezone=True), nullable=False,
            server_default=sa.text('now()'),
        ),
    )
    op.create_index('ix_posts_created_at', 'posts', ['created_at'])


def downgrade() -> None:
    op.drop_index('ix_posts_created_at', table_name='posts')
    op.drop_table('posts')
