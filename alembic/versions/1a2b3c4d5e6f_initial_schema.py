"""initial schema: assets, asset_requests, users

Revision ID: 1a2b3c4d5e6f
Revises:
Create Date: 2026-10-12 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

revision = '1a2b3c4d5e6f'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'assets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('image', sa.String(length=1000), nullable=True),
        sa.Column('type', sa.String(length=128), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('quantity >= 0', name='ck_asset_quantity_non_negative'),
    )
    op.create_index('ix_assets_id', 'assets', ['id'])
    op.create_index('ix_assets_name', 'assets', ['name'])
    op.create_index('ix_assets_type', 'assets', ['type'])

    op.create_table(
        'asset_requests',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('asset_id', sa.Integer(), nullable=False),
        sa.Column('asset_name', sa.String(length=255), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('reason', sa.String(length=2000), nullable=False),
        sa.Column(
            'status',
            sa.Enum('pending', 'approved', 'rejected', name='requeststatus'),
            nullable=False,
        ),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('user_name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
    )
    op.create_index('ix_asset_requests_id', 'asset_requests', ['id'])
    op.create_index('ix_asset_requests_asset_id', 'asset_requests', ['asset_id'])
    op.create_index('ix_asset_requests_created_at', 'asset_requests', ['created_at'])

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=32), nullable=True),
        sa.Column('status', sa.String(length=32), nullable=True),
        sa.Column('team', sa.String(length=255), nullable=True),
        sa.Column('photo_url', sa.String(length=1000), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'])


def downgrade() -> None:
    op.drop_table('users')
    op.drop_table('asset_requests')
    op.drop_table('assets')
