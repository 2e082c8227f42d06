"""Initial schema: users, results, measurements, training program

Revision ID: 001
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables."""
    op.create_table('users', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('hashed_password', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False, server_default=''),
        sa.Column('role', sa.Enum('USER', 'ADMIN', name='userrole'), nullable=False, server_default='USER'),
        sa.Column('avatar', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('avatar_type', sa.Enum('EMOJI', 'PHOTO', name='avatartype'), nullable=False,
                  server_default='EMOJI'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table('results', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('discipline_slug', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('value', sa.Float(), nullable=False),
        sa.Column('recorded_at', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_results_user_id'), 'results', ['user_id'], unique=False)
    op.create_index('ix_results_user_slug_recorded', 'results', ['user_id', 'discipline_slug', 'recorded_at'],
                    unique=False)

    op.create_table('measurements', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('type', sa.Enum('WEIGHT', 'HEIGHT', 'CHEST', 'WAIST', 'HIPS', 'BICEPS', 'SHOULDERS', 'GLUTES',
                                  name='measurementtype'), nullable=False),
        sa.Column('value', sa.Float(), nullable=False),
        sa.Column('recorded_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_measurements_user_id'), 'measurements', ['user_id'], unique=False)
    op.create_index(op.f('ix_measurements_recorded_at'), 'measurements', ['recorded_at'], unique=False)

    op.create_table('programs', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_programs_is_active'), 'programs', ['is_active'], unique=False)

    op.create_table('cycles', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('program_id', sa.Integer(), nullable=False),
        sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('color', sqlmodel.sql.sqltypes.AutoString(length=32), nullable=True),
        sa.Column('order_index', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['program_id'], ['programs.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_cycles_program_id'), 'cycles', ['program_id'], unique=False)

    op.create_table('phases', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('cycle_id', sa.Integer(), nullable=False),
        sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('color', sqlmodel.sql.sqltypes.AutoString(length=32), nullable=True),
        sa.Column('order_index', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['cycle_id'], ['cycles.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_phases_cycle_id'), 'phases', ['cycle_id'], unique=False)

    op.create_table('workouts', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('phase_id', sa.Integer(), nullable=False),
        sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['phase_id'], ['phases.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_workouts_phase_id'), 'workouts', ['phase_id'], unique=False)

    op.create_table('workout_blocks', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('workout_id', sa.Integer(), nullable=False),
        sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('order_index', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['workout_id'], ['workouts.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_workout_blocks_workout_id'), 'workout_blocks', ['workout_id'], unique=False)

    op.create_table('block_rows', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('block_id', sa.Integer(), nullable=False),
        sa.Column('prefix', sqlmodel.sql.sqltypes.AutoString(length=16), nullable=True),
        sa.Column('content', sqlmodel.sql.sqltypes.AutoString(length=2000), nullable=False, server_default=''),
        sa.Column('order_index', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['block_id'], ['workout_blocks.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_block_rows_block_id'), 'block_rows', ['block_id'], unique=False)


def downgrade() -> None:
    """Drop all tables, children first."""
    op.drop_index(op.f('ix_block_rows_block_id'), table_name='block_rows')
    op.drop_table('block_rows')
    op.drop_index(op.f('ix_workout_blocks_workout_id'), table_name='workout_blocks')
    op.drop_table('workout_blocks')
    op.drop_index(op.f('ix_workouts_phase_id'), table_name='workouts')
    op.drop_table('workouts')
    op.drop_index(op.f('ix_phases_cycle_id'), table_name='phases')
    op.drop_table('phases')
    op.drop_index(op.f('ix_cycles_program_id'), table_name='cycles')
    op.drop_table('cycles')
    op.drop_index(op.f('ix_programs_is_active'), table_name='programs')
    op.drop_table('programs')
    op.drop_index(op.f('ix_measurements_recorded_at'), table_name='measurements')
    op.drop_index(op.f('ix_measurements_user_id'), table_name='measurements')
    op.drop_table('measurements')
    op.drop_index('ix_results_user_slug_recorded', table_name='results')
    op.drop_index(op.f('ix_results_user_id'), table_name='results')
    op.drop_table('results')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
    sa.Enum(name='measurementtype').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='avatartype').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='userrole').drop(op.get_bind(), checkfirst=True)
