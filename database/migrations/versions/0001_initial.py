"""Create panel tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('panel_users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(), nullable=True),
        sa.Column('hashed_password', sa.String(), nullable=True),
        sa.Column('steam_identifier', sa.String(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_panel_users'))
    )
    op.create_index(op.f('ix_panel_users_id'), 'panel_users', ['id'], unique=False)
    op.create_index(op.f('ix_panel_users_username'), 'panel_users', ['username'], unique=True)
    op.create_index(op.f('ix_panel_users_steam_identifier'), 'panel_users', ['steam_identifier'], unique=False)

    op.create_table('users',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('steam_identifier', sa.String(), nullable=False),
        sa.Column('player_name', sa.String(), nullable=True),
        sa.Column('identifiers', sa.JSON(), nullable=True),
        sa.Column('is_staff', sa.Boolean(), nullable=True),
        sa.Column('is_super_admin', sa.Boolean(), nullable=True),
        sa.Column('is_trusted', sa.Boolean(), nullable=True),
        sa.Column('is_panel_trusted', sa.Boolean(), nullable=True),
        sa.Column('is_debugger', sa.Boolean(), nullable=True),
        sa.Column('is_soft_banned', sa.Boolean(), nullable=True),
        sa.Column('playtime', sa.Integer(), nullable=True),
        sa.Column('total_joins', sa.Integer(), nullable=True),
        sa.Column('priority_level', sa.Integer(), nullable=True),
        sa.Column('last_connection', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('user_id', name=op.f('pk_users'))
    )
    op.create_index(op.f('ix_users_user_id'), 'users', ['user_id'], unique=False)
    op.create_index(op.f('ix_users_steam_identifier'), 'users', ['steam_identifier'], unique=True)
    op.create_index(op.f('ix_users_player_name'), 'users', ['player_name'], unique=False)

    op.create_table('characters',
        sa.Column('character_id', sa.Integer(), nullable=False),
        sa.Column('steam_identifier', sa.String(), nullable=False),
        sa.Column('character_slot', sa.Integer(), nullable=True),
        sa.Column('gender', sa.Integer(), nullable=True),
        sa.Column('first_name', sa.String(), nullable=True),
        sa.Column('last_name', sa.String(), nullable=True),
        sa.Column('date_of_birth', sa.Date(), nullable=True),
        sa.Column('backstory', sa.Text(), nullable=True),
        sa.Column('cash', sa.Integer(), nullable=True),
        sa.Column('bank', sa.Integer(), nullable=True),
        sa.Column('money', sa.Integer(), nullable=True),
        sa.Column('stocks_balance', sa.Integer(), nullable=True),
        sa.Column('job_name', sa.String(), nullable=True),
        sa.Column('department_name', sa.String(), nullable=True),
        sa.Column('position_name', sa.String(), nullable=True),
        sa.Column('character_deleted', sa.Boolean(), nullable=True),
        sa.Column('character_deletion_timestamp', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['steam_identifier'], ['users.steam_identifier'], name=op.f('fk_characters_steam_identifier_users')),
        sa.PrimaryKeyConstraint('character_id', name=op.f('pk_characters'))
    )
    op.create_index(op.f('ix_characters_character_id'), 'characters', ['character_id'], unique=False)
    op.create_index(op.f('ix_characters_steam_identifier'), 'characters', ['steam_identifier'], unique=False)

    op.create_table('character_vehicles',
        sa.Column('vehicle_id', sa.Integer(), nullable=False),
        sa.Column('owner_cid', sa.Integer(), nullable=False),
        sa.Column('model_name', sa.String(), nullable=True),
        sa.Column('plate', sa.String(), nullable=True),
        sa.ForeignKeyConstraint(['owner_cid'], ['characters.character_id'], name=op.f('fk_character_vehicles_owner_cid_characters')),
        sa.PrimaryKeyConstraint('vehicle_id', name=op.f('pk_character_vehicles'))
    )
    op.create_index(op.f('ix_character_vehicles_vehicle_id'), 'character_vehicles', ['vehicle_id'], unique=False)
    op.create_index(op.f('ix_character_vehicles_owner_cid'), 'character_vehicles', ['owner_cid'], unique=False)
    op.create_index(op.f('ix_character_vehicles_plate'), 'character_vehicles', ['plate'], unique=False)

    op.create_table('user_bans',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('ban_hash', sa.String(), nullable=True),
        sa.Column('identifier', sa.String(), nullable=True),
        sa.Column('reason', sa.Text(), nullable=True),
        sa.Column('timestamp', sa.DateTime(), nullable=True),
        sa.Column('expire', sa.Integer(), nullable=True),
        sa.Column('creator_name', sa.String(), nullable=True),
        sa.Column('creator_identifier', sa.String(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_user_bans'))
    )
    op.create_index(op.f('ix_user_bans_id'), 'user_bans', ['id'], unique=False)
    op.create_index(op.f('ix_user_bans_ban_hash'), 'user_bans', ['ban_hash'], unique=False)
    op.create_index(op.f('ix_user_bans_identifier'), 'user_bans', ['identifier'], unique=False)

    op.create_table('warnings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('player_id', sa.Integer(), nullable=False),
        sa.Column('issuer_id', sa.Integer(), nullable=True),
        sa.Column('message', sa.Text(), nullable=True),
        sa.Column('warning_type', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['player_id'], ['users.user_id'], name=op.f('fk_warnings_player_id_users')),
        sa.ForeignKeyConstraint(['issuer_id'], ['users.user_id'], name=op.f('fk_warnings_issuer_id_users')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_warnings'))
    )
    op.create_index(op.f('ix_warnings_id'), 'warnings', ['id'], unique=False)
    op.create_index(op.f('ix_warnings_player_id'), 'warnings', ['player_id'], unique=False)

    op.create_table('panel_logs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('source_identifier', sa.String(), nullable=True),
        sa.Column('target_identifier', sa.String(), nullable=True),
        sa.Column('action', sa.String(), nullable=True),
        sa.Column('log', sa.Text(), nullable=True),
        sa.Column('timestamp', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_panel_logs'))
    )
    op.create_index(op.f('ix_panel_logs_id'), 'panel_logs', ['id'], unique=False)
    op.create_index(op.f('ix_panel_logs_source_identifier'), 'panel_logs', ['source_identifier'], unique=False)
    op.create_index(op.f('ix_panel_logs_target_identifier'), 'panel_logs', ['target_identifier'], unique=False)

    op.create_table('user_logs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('identifier', sa.String(), nullable=True),
        sa.Column('action', sa.String(), nullable=True),
        sa.Column('details', sa.Text(), nullable=True),
        sa.Column('metadata', sa.JSON(), nullable=True),
        sa.Column('timestamp', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_user_logs'))
    )
    op.create_index(op.f('ix_user_logs_id'), 'user_logs', ['id'], unique=False)
    op.create_index(op.f('ix_user_logs_identifier'), 'user_logs', ['identifier'], unique=False)
    op.create_index(op.f('ix_user_logs_action'), 'user_logs', ['action'], unique=False)
    op.create_index(op.f('ix_user_logs_timestamp'), 'user_logs', ['timestamp'], unique=False)


def downgrade() -> None:
    op.drop_table('user_logs')
    op.drop_table('panel_logs')
    op.drop_table('warnings')
    op.drop_table('user_bans')
    op.drop_table('character_vehicles')
    op.drop_table('characters')
    op.drop_table('users')
    op.drop_table('panel_users')
