"""create voting tables

Revision ID: 3b1f0c2a9d41
Revises: 
Create Date: 2026-02-02 10:21:07.114502

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3b1f0c2a9d41'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('open_id', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('email', sa.String(length=320), nullable=True),
        sa.Column('login_method', sa.String(length=64), nullable=True),
        sa.Column('hashed_password', sa.String(), nullable=True),
        sa.Column('role', sa.Enum('user', 'admin', name='userrole'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('last_signed_in', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_open_id', 'users', ['open_id'], unique=True)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'players',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('team', sa.String(length=255), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('position', sa.String(length=100), nullable=True),
        sa.Column('number', sa.Integer(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True
    )

    op.create_table(
        'votes',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('player_id', sa.Integer(), nullable=False),
        sa.Column('device_fingerprint', sa.String(length=255), nullable=False),
        sa.Column('ip_address', sa.String(length=45), nullable=True),
        sa.Column('user_agent', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_votes_player_id', 'votes', ['player_id'])

    # 기기당 1표: fingerprint 유니크 제약
    op.create_table(
        'device_fingerprints',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('fingerprint', sa.String(length=255), nullable=False),
        sa.Column('has_voted', sa.Boolean(), nullable=False),
        sa.Column('last_vote_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('fingerprint')
    )

    op.create_table(
        'player_milestones',
        sa.Column('player_id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('highest_notified', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('player_id')
    )


def downgrade() -> None:
    # 테이블 삭제 (역순)
    op.drop_table('player_milestones')
    op.drop_table('device_fingerprints')
    op.drop_index('ix_votes_player_id', table_name='votes')
    op.drop_table('votes')
    op.drop_table('players')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_open_id', table_name='users')
    op.drop_table('users')
    sa.Enum(name='userrole').drop(op.get_bind(), checkfirst=True)
