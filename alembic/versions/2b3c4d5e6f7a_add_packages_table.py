"""add packages table for confirmed checkout tiers

Revision ID: 2b3c4d5e6f7a
Revises: 1a2b3c4d5e6f
Create Date: 2026-10-15 14:30:00.000000

"""
from alembic import op
import sqlalchemy as sa

revision = '2b3c4d5e6f7a'
down_revision = '1a2b3c4d5e6f'
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'packages',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('hr_id', sa.String(length=128), nullable=False),
        sa.Column('package_type', sa.String(length=64), nullable=False),
        sa.Column('package_limit', sa.Integer(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_packages_id', 'packages', ['id'])
    op.create_index('ix_packages_hr_id', 'packages', ['hr_id'], unique=True)


def downgrade() -> None:
    op.drop_index('ix_packages_hr_id', table_name='packages')
    op.drop_table('packages')
