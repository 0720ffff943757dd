"""add name keys to books and wishlist items

Revision ID: c37d1e5f0a42
Revises: 9a4f2c6e83b0
Create Date: 2026-10-19 10:15:27.304118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from bookcorner.services.catalog import name_key


# revision identifiers, used by Alembic.
revision: str = 'c37d1e5f0a42'
down_revision: Union[str, Sequence[str], None] = '9a4f2c6e83b0'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TABLES = ('books', 'wishlist_items')


def upgrade() -> None:
    """Upgrade schema."""
    conn = op.get_bind()
    for table_name in TABLES:
        with op.batch_alter_table(table_name) as batch_op:
            batch_op.add_column(sa.Column('name_key', sa.Integer(), nullable=True))

        table = sa.table(
            table_name,
            sa.column('id', sa.Integer()),
            sa.column('title', sa.String()),
            sa.column('author', sa.String()),
            sa.column('name_key', sa.Integer()),
        )
        rows = conn.execute(sa.select(table.c.id, table.c.title, table.c.author)).all()
        for row_id, title, author in rows:
            conn.execute(
                table.update().where(table.c.id == row_id).values(name_key=name_key(title, author))
            )

        with op.batch_alter_table(table_name) as batch_op:
            batch_op.alter_column('name_key', existing_type=sa.Integer(), nullable=False)
            batch_op.create_index(f'ix_{table_name}_name_key', ['name_key'], unique=True)


def downgrade() -> None:
    """Downgrade schema."""
    for table_name in reversed(TABLES):
        with op.batch_alter_table(table_name) as batch_op:
            batch_op.drop_index(f'ix_{table_name}_name_key')
            batch_op.drop_column('name_key')
