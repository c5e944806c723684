"""Add daily records, weekly summaries and coach plans

Revision ID: 001
Revises:
Create Date: 2026-10-18 12:00:00.000000

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
    """Create daily_records, weekly_summaries and coach_plans tables."""
    op.create_table('daily_records', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('athlete_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('day', sa.Date(), nullable=False),
        sa.Column('mileage', sa.Float(), nullable=True),
        sa.Column('stress', sa.Float(), nullable=True),
        sa.Column('sleep', sa.Float(), nullable=True),
        sa.Column('resting_heart_rate', sa.Float(), nullable=True),
        sa.Column('exercise_heart_rate', sa.Float(), nullable=True),
        sa.Column('perceived_exertion', sa.Float(), nullable=True),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('recommendation', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('athlete_id', 'day', name='uq_daily_record_athlete_day'))
    op.create_index(op.f('ix_daily_records_athlete_id'), 'daily_records', ['athlete_id'], unique=False)
    op.create_index(op.f('ix_daily_records_day'), 'daily_records', ['day'], unique=False)

    trend_columns = []
    for metric in ('stress', 'sleep', 'resting_heart_rate', 'exercise_heart_rate', 'perceived_exertion'):
        trend_columns.append(sa.Column(f'average_{metric}', sa.Float(), nullable=True))
        trend_columns.append(sa.Column(f'{metric}_trend', sqlmodel.sql.sqltypes.AutoString(length=16),
                                       nullable=False, server_default='unchanged'))

    op.create_table('weekly_summaries', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('athlete_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('week_start', sa.Date(), nullable=False),
        sa.Column('week_end', sa.Date(), nullable=False),
        sa.Column('mileage_so_far', sa.Float(), nullable=False, server_default='0'),
        *trend_columns,
        sa.Column('daily_records', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('athlete_id', 'week_start', name='uq_weekly_summary_athlete_week'))
    op.create_index(op.f('ix_weekly_summaries_athlete_id'), 'weekly_summaries', ['athlete_id'], unique=False)
    op.create_index(op.f('ix_weekly_summaries_week_start'), 'weekly_summaries', ['week_start'], unique=False)

    op.create_table('coach_plans', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('athlete_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('coach_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('day', sa.Date(), nullable=False),
        sa.Column('percentage', sa.Float(), nullable=False),
        sa.Column('note', sqlmodel.sql.sqltypes.AutoString(), nullable=False, server_default=''),
        sa.Column('mileage_recommendation', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('athlete_id', 'day', name='uq_coach_plan_athlete_day'))
    op.create_index(op.f('ix_coach_plans_athlete_id'), 'coach_plans', ['athlete_id'], unique=False)
    op.create_index(op.f('ix_coach_plans_day'), 'coach_plans', ['day'], unique=False)


def downgrade() -> None:
    """Drop the training records tables."""
    op.drop_index(op.f('ix_coach_plans_day'), table_name='coach_plans')
    op.drop_index(op.f('ix_coach_plans_athlete_id'), table_name='coach_plans')
    op.drop_table('coach_plans')
    op.drop_index(op.f('ix_weekly_summaries_week_start'), table_name='weekly_summaries')
    op.drop_index(op.f('ix_weekly_summaries_athlete_id'), table_name='weekly_summaries')
    op.drop_table('weekly_summaries')
    op.drop_index(op.f('ix_daily_records_day'), table_name='daily_records')
    op.drop_index(op.f('ix_daily_records_athlete_id'), table_name='daily_records')
    op.drop_table('daily_records')
