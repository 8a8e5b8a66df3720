"""Create products table.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create products table."""
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column('name', sa.String(500), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('price', sa.Numeric(12, 2), nullable=False),
        sa.Column('category', sa.String(200), nullable=False, server_default=''),
        sa.Column('stock', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('image_url', sa.String(1000), nullable=False, server_default=''),
    )

    op.create_index('ix_products_name', 'products', ['name'])
    op.create_index('ix_products_price', 'products', ['price'])
    op.create_index('ix_products_category', 'products', ['category'])


def downgrade() -> None:
    """Drop products table."""
    op.drop_index('ix_products_category', table_name='products')
    op.drop_index('ix_products_price', table_name='products')
    op.drop_index('ix_products_name', table_name='products')
    op.drop_table('products')
