"""create verification_codes table

Revision ID: 5d1c2a7e9b41
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


revision = '5d1c2a7e9b41'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'verification_codes',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('verifiable', sa.String(length=255), nullable=False),
        sa.Column('code', sa.String(length=255), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_verification_codes_verifiable', 'verification_codes', ['verifiable'])


def downgrade():
    op.drop_index('idx_verification_codes_verifiable', table_name='verification_codes')
    op.drop_table('verification_codes')
