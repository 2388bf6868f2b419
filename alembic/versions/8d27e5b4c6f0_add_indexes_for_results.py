"""add indexes for results

Revision ID: 8d27e5b4c6f0
Revises: 3b1f0c2a9d41
Create Date: 2026-02-09 18:42:31.902117

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8d27e5b4c6f0'
down_revision: Union[str, Sequence[str], None] = '3b1f0c2a9d41'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 인덱스 생성
    op.create_index('idx_players_is_active', 'players', ['is_active'])
    op.create_index('idx_votes_created_at', 'votes', ['created_at'])
    op.create_index('idx_votes_device_fingerprint', 'votes', ['device_fingerprint'])


def downgrade() -> None:
    # 인덱스 삭제 (역순)
    op.drop_index('idx_votes_device_fingerprint')
    op.drop_index('idx_votes_created_at')
    op.drop_index('idx_players_is_active')
