"""Add partners, workout_logs and weekly_results tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000

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
    """Create competition tables."""
    op.create_table('partners', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('color', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('weekly_goal', sa.Integer(), nullable=False),
        sa.Column('calorie_goal', sa.Integer(), nullable=False),
        sa.Column('streak', sa.Integer(), nullable=False),
        sa.Column('goal', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('age', sa.Integer(), nullable=True),
        sa.Column('height_cm', sa.Integer(), nullable=True),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('weight_unit', sa.Enum('KG', 'LB', name='weightunit'), nullable=False),
        sa.Column('sex', sa.Enum('MALE', 'FEMALE', name='sex'), nullable=True),
        sa.Column('fitness_level', sa.Enum('BEGINNER', 'INTERMEDIATE', 'ADVANCED', name='fitnesslevel'),
                  nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))

    op.create_table('workout_logs', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('partner_id', sa.Integer(), nullable=False),
        sa.Column('activity_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('calories_burned', sa.Integer(), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        sa.Column('logged_at', sa.DateTime(), nullable=False),
        sa.Column('effort_score', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['partner_id'], ['partners.id'], ),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_workout_logs_partner_id'), 'workout_logs', ['partner_id'], unique=False)
    op.create_index(op.f('ix_workout_logs_logged_at'), 'workout_logs', ['logged_at'], unique=False)

    op.create_table('weekly_results', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('week_start', sa.Date(), nullable=False),
        sa.Column('winner_id', sa.Integer(), nullable=True),
        sa.Column('winner_score', sa.Integer(), nullable=False),
        sa.Column('runner_up_score', sa.Integer(), nullable=False),
        sa.Column('is_tie', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['winner_id'], ['partners.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('week_start', name='uq_weekly_result_week_start'))
    op.create_index(op.f('ix_weekly_results_week_start'), 'weekly_results', ['week_start'], unique=False)


def downgrade() -> None:
    """Drop competition tables."""
    op.drop_index(op.f('ix_weekly_results_week_start'), table_name='weekly_results')
    op.drop_table('weekly_results')
    op.drop_index(op.f('ix_workout_logs_logged_at'), table_name='workout_logs')
    op.drop_index(op.f('ix_workout_logs_partner_id'), table_name='workout_logs')
    op.drop_table('workout_logs')
    op.drop_table('partners')
    sa.Enum(name='fitnesslevel').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='sex').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='weightunit').drop(op.get_bind(), checkfirst=True)
