"""create_team_and_member

Revision ID: 7c3e9f1b2d84
Revises:
Create Date: 2026-10-19 09:00:00.000000

팀/회원 테이블 생성: team, member.
Create the team and member tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '7c3e9f1b2d84'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# SQLite autoincrement는 INTEGER PRIMARY KEY에서만 동작
ID_TYPE = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    # team — 회원이 소속되는 팀
    op.create_table(
        'team',
        sa.Column('id', ID_TYPE, primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
    )

    # member — 회원, 팀 FK는 nullable (a member may have no team)
    op.create_table(
        'member',
        sa.Column('member_id', ID_TYPE, primary_key=True, autoincrement=True),
        sa.Column('username', sa.String(255), nullable=True),
        sa.Column('age', sa.Integer(), nullable=False),
        sa.Column('team_id', ID_TYPE, sa.ForeignKey('team.id'), nullable=True),
    )
    op.create_index('ix_member_team_id', 'member', ['team_id'])


def downgrade() -> None:
    op.drop_index('ix_member_team_id', table_name='member')
    op.drop_table('member')
    op.drop_table('team')
