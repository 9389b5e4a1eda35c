"""create_business_partners

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:12:44.301217

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    if not inspector.has_table('business_partners'):
        op.create_table('business_partners',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('first_name', sa.String(length=255), nullable=True),
        sa.Column('last_name', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('phone', sa.String(length=255), nullable=True),
        sa.Column('country', sa.String(length=255), nullable=True),
        sa.Column('partner_type', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('modified_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_business_partners_country'), 'business_partners', ['country'], unique=False)
        op.create_index(op.f('ix_business_partners_partner_type'), 'business_partners', ['partner_type'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    if inspector.has_table('business_partners'):
        op.drop_index(op.f('ix_business_partners_partner_type'), table_name='business_partners')
        op.drop_index(op.f('ix_business_partners_country'), table_name='business_partners')
        op.drop_table('business_partners')
