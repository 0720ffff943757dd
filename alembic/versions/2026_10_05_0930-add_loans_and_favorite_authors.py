"""add loans and favorite authors

Revision ID: 9a4f2c6e83b0
Revises: 5e1c0a9b7d21
Create Date: 2026-10-05 09:30:41.552917

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '9a4f2c6e83b0'
down_revision: Union[str, Sequence[str], None] = '5e1c0a9b7d21'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    with op.batch_alter_table('books') as batch_op:
        batch_op.add_column(sa.Column('loaned_to', sa.String(length=200), nullable=True))
        batch_op.add_column(sa.Column('loaned_at', sa.DateTime(), nullable=True))
    op.create_table(
        'favorite_authors',
        sa.Column('id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('name', sa.String(length=300), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('favorite_authors')
    with op.batch_alter_table('books') as batch_op:
        batch_op.drop_column('loaned_at')
        batch_op.drop_column('loaned_to')
