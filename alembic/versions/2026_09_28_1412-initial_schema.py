"""initial schema

Revision ID: 5e1c0a9b7d21
Revises:
Create Date: 2026-09-28 14:12:03.118406

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5e1c0a9b7d21'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'books',
        sa.Column('id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('author', sa.String(length=300), nullable=False),
        sa.Column('added_by', sa.String(length=200), nullable=False),
        sa.Column('average_rating', sa.Float(), nullable=False),
        sa.Column('total_reviews', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_books_author', 'books', ['author'], unique=False)
    op.create_table(
        'reviews',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('book_id', sa.Integer(), nullable=False),
        sa.Column('reviewer_name', sa.String(length=200), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=True),
        sa.Column('comment', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['book_id'], ['books.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('book_id', 'reviewer_name'),
    )
    op.create_index('ix_reviews_book_id', 'reviews', ['book_id'], unique=False)
    op.create_table(
        'wishlist_items',
        sa.Column('id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('author', sa.String(length=300), nullable=False),
        sa.Column('added_by', sa.String(length=200), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_wishlist_items_author', 'wishlist_items', ['author'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_wishlist_items_author', table_name='wishlist_items')
    op.drop_table('wishlist_items')
    op.drop_index('ix_reviews_book_id', table_name='reviews')
    op.drop_table('reviews')
    op.drop_index('ix_books_author', table_name='books')
    op.drop_table('books')
