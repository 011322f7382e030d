"""create_books_table

Revision ID: 3f1c9a2b7d10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a2b7d10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'books',
        sa.Column(
            'isbn',
            sa.String(length=20),
            nullable=False,
            comment='International Standard Book Number'
        ),
        sa.Column(
            'amazon_url',
            sa.String(length=2048),
            nullable=False,
            comment='Amazon product page URL'
        ),
        sa.Column('author', sa.String(length=500), nullable=False),
        sa.Column('language', sa.String(length=100), nullable=False),
        sa.Column(
            'pages',
            sa.Integer(),
            nullable=False,
            comment='Number of pages in the book'
        ),
        sa.Column('publisher', sa.String(length=500), nullable=False),
        sa.Column(
            'title',
            sa.String(length=500),
            nullable=False,
            comment='Book title'
        ),
        sa.Column(
            'year',
            sa.Integer(),
            nullable=False,
            comment='Year of publication'
        ),
        sa.PrimaryKeyConstraint('isbn'),
    )
    op.create_index(op.f('ix_books_title'), 'books', ['title'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_books_title'), table_name='books')
    op.drop_table('books')
