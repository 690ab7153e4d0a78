"""create users, categories, photos

Revision ID: 3b1f0c9d2e47
Revises:
Create Date: 2026-10-18 11:02:13.418206

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3b1f0c9d2e47'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'categories',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('registered_date', sa.DateTime(timezone=True)),
    )

    op.create_table(
        'photos',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('user_id', sa.String(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('category_id', sa.String(), sa.ForeignKey('categories.id'), nullable=False),
        sa.Column('path', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('desc', sa.String(), nullable=True),
        sa.Column('is_public', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('registered_date', sa.DateTime(timezone=True)),
        sa.Column('version', sa.Integer(), nullable=False, server_default='0'),
    )
    # 목록 조회 필터용 인덱스
    op.create_index('ix_photos_user_id', 'photos', ['user_id'])
    op.create_index('ix_photos_is_public', 'photos', ['is_public'])


def downgrade() -> None:
    # 역순 삭제
    op.drop_index('ix_photos_is_public', table_name='photos')
    op.drop_index('ix_photos_user_id', table_name='photos')
    op.drop_table('photos')
    op.drop_table('categories')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
