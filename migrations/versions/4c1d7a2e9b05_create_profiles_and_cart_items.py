"""create_profiles_and_cart_items

Revision ID: 4c1d7a2e9b05
Revises:
Create Date: 2026-10-19 09:12:44.381207

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c1d7a2e9b05'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create profiles and cart_items tables."""
    # Profile IDs are issued by the identity provider, never generated here
    op.create_table('profiles',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('avatar_url', sa.String(length=500), nullable=True),
        sa.Column('role', sa.Integer(), server_default='1', nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_profiles_role', 'profiles', ['role'])

    op.create_table('cart_items',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('profile_id', sa.String(length=255), nullable=False),
        sa.Column('item_id', sa.String(length=100), nullable=False),
        sa.Column('qty', sa.Integer(), nullable=False),
        sa.Column('order_type', sa.String(length=50), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['profile_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_cart_items_profile_id', 'cart_items', ['profile_id'])


def downgrade() -> None:
    """Drop cart_items and profiles tables."""
    op.drop_index('ix_cart_items_profile_id', table_name='cart_items')
    op.drop_table('cart_items')
    op.drop_index('ix_profiles_role', table_name='profiles')
    op.drop_table('profiles')
