"""initial metaverse schema

Revision ID: metaverse_001
Revises:
Create Date: 2026-10-19 10:00:00.000000

Creates the catalog tables (avatars, elements, maps, map_elements), users
and the user-owned spaces with their element placements.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'metaverse_001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('avatars',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('image_url', sa.String(length=1000), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('elements',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('image_url', sa.String(length=1000), nullable=False),
        sa.Column('width', sa.Integer(), nullable=False),
        sa.Column('height', sa.Integer(), nullable=False),
        sa.Column('static', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint('width >= 1', name='ck_elements_width_positive'),
        sa.CheckConstraint('height >= 1', name='ck_elements_height_positive'),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('maps',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('width', sa.Integer(), nullable=False),
        sa.Column('height', sa.Integer(), nullable=False),
        sa.Column('thumbnail', sa.String(length=1000), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint('width >= 1', name='ck_maps_width_positive'),
        sa.CheckConstraint('height >= 1', name='ck_maps_height_positive'),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('map_elements',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('map_id', sa.Uuid(), nullable=False),
        sa.Column('element_id', sa.Uuid(), nullable=False),
        sa.Column('x', sa.Integer(), nullable=False),
        sa.Column('y', sa.Integer(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.ForeignKeyConstraint(['map_id'], ['maps.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['element_id'], ['elements.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_map_elements_map_id', 'map_elements', ['map_id'], unique=False)
    op.create_index('ix_map_elements_element_id', 'map_elements', ['element_id'], unique=False)
    op.create_index('idx_map_elements_map_position', 'map_elements', ['map_id', 'position'], unique=False)

    op.create_table('users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('username', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=10), nullable=False, server_default='User'),
        sa.Column('avatar_id', sa.Uuid(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['avatar_id'], ['avatars.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    op.create_table('spaces',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('width', sa.Integer(), nullable=False),
        sa.Column('height', sa.Integer(), nullable=False),
        sa.Column('thumbnail', sa.String(length=1000), nullable=True),
        sa.Column('creator_id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint('width >= 1', name='ck_spaces_width_positive'),
        sa.CheckConstraint('height >= 1', name='ck_spaces_height_positive'),
        sa.ForeignKeyConstraint(['creator_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_spaces_creator_id', 'spaces', ['creator_id'], unique=False)

    op.create_table('space_elements',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('space_id', sa.Uuid(), nullable=False),
        sa.Column('element_id', sa.Uuid(), nullable=False),
        sa.Column('x', sa.Integer(), nullable=False),
        sa.Column('y', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['space_id'], ['spaces.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['element_id'], ['elements.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_space_elements_space_element', 'space_elements', ['space_id', 'element_id'], unique=False)


def downgrade() -> None:
    op.drop_index('idx_space_elements_space_element', table_name='space_elements')
    op.drop_table('space_elements')
    op.drop_index('ix_spaces_creator_id', table_name='spaces')
    op.drop_table('spaces')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
    op.drop_index('idx_map_elements_map_position', table_name='map_elements')
    op.drop_index('ix_map_elements_element_id', table_name='map_elements')
    op.drop_index('ix_map_elements_map_id', table_name='map_elements')
    op.drop_table('map_elements')
    op.drop_table('maps')
    op.drop_table('elements')
    op.drop_table('avatars')
