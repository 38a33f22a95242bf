"""Initial mentorship schema: roles, profiles, assignments, tickets, intake

Revision ID: 20261019_initial_mentorship_schema
Revises:
Create Date: 2026-10-19 09:00:00
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

from mentorship_admin.models.role import DEFAULT_ROLES

# revision identifiers, used by Alembic.
revision: str = '20261019_initial_mentorship_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _profile_fk(column: str) -> sa.Column:
    return sa.Column(
        column,
        sa.String(),
        sa.ForeignKey('profiles.profile_id', ondelete='RESTRICT', onupdate='RESTRICT'),
        nullable=False,
    )


def upgrade() -> None:
    roles = op.create_table(
        'roles',
        sa.Column('role_id', sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column('role_name', sa.String(), nullable=False, unique=True),
    )
    op.bulk_insert(roles, DEFAULT_ROLES)

    op.create_table(
        'profiles',
        sa.Column('profile_id', sa.String(), primary_key=True),
        sa.Column('first_name', sa.String(50), nullable=False),
        sa.Column('last_name', sa.String(50), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column(
            'role_id',
            sa.Integer(),
            sa.ForeignKey('roles.role_id', ondelete='RESTRICT', onupdate='RESTRICT'),
            nullable=False,
            server_default='5',
        ),
        sa.Column('is_active', sa.Boolean(), nullable=True),
        sa.Column('progress_id', sa.Integer(), nullable=True),
        sa.Column('progress_status', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True, server_default=sa.text('now()')),
    )
    op.create_index('ix_profiles_profile_id', 'profiles', ['profile_id'])
    op.create_index('ix_profiles_email', 'profiles', ['email'])

    op.create_table(
        'assignments',
        sa.Column('assignment_id', sa.Integer(), primary_key=True, autoincrement=True),
        _profile_fk('mentor_id'),
        _profile_fk('mentee_id'),
    )
    op.create_index('ix_assignments_mentor_id', 'assignments', ['mentor_id'])
    op.create_index('ix_assignments_mentee_id', 'assignments', ['mentee_id'])

    op.create_table(
        'action_tickets',
        sa.Column('action_ticket_id', sa.Integer(), primary_key=True, autoincrement=True),
        _profile_fk('submitted_by'),
        _profile_fk('subject_id'),
        sa.Column('issue', sa.Text(), nullable=False),
        sa.Column('pending', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('resolved', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('strike', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('comments', sa.Text(), nullable=True),
    )

    op.create_table(
        'application_tickets',
        sa.Column('application_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            'position',
            sa.Integer(),
            sa.ForeignKey('roles.role_id', ondelete='RESTRICT', onupdate='RESTRICT'),
            nullable=False,
        ),
        _profile_fk('profile_id'),
        sa.Column('approved', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('application_notes', sa.String(), nullable=True, server_default=''),
        sa.Column('created_at', sa.DateTime(), nullable=True, server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(), nullable=True, server_default=sa.text('now()')),
    )
    op.create_index('ix_application_tickets_profile_id', 'application_tickets', ['profile_id'])

    op.create_table(
        'mentor_intake',
        sa.Column('mentor_intake_id', sa.Integer(), primary_key=True, autoincrement=True),
        _profile_fk('profile_id'),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('location', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('current_comp', sa.String(), nullable=True),
        sa.Column('other_tech', sa.Boolean(), nullable=True),
        sa.Column('front_end', sa.Boolean(), nullable=True, server_default=sa.false()),
        sa.Column('back_end', sa.Boolean(), nullable=True, server_default=sa.false()),
        sa.Column('full_stack', sa.Boolean(), nullable=True, server_default=sa.false()),
        sa.Column('android_mobile', sa.Boolean(), nullable=True, server_default=sa.false()),
        sa.Column('ios_mobile', sa.Boolean(), nullable=True, server_default=sa.false()),
        sa.Column('experience_level', sa.String(), nullable=False),
        sa.Column('mentor_commitment', sa.String(255), nullable=False),
        sa.Column('other_info', sa.String(255), nullable=True),
    )
    op.create_index('ix_mentor_intake_profile_id', 'mentor_intake', ['profile_id'])


def downgrade() -> None:
    op.drop_index('ix_mentor_intake_profile_id', table_name='mentor_intake')
    op.drop_table('mentor_intake')
    op.drop_index('ix_application_tickets_profile_id', table_name='application_tickets')
    op.drop_table('application_tickets')
    op.drop_table('action_tickets')
    op.drop_index('ix_assignments_mentee_id', table_name='assignments')
    op.drop_index('ix_assignments_mentor_id', table_name='assignments')
    op.drop_table('assignments')
    op.drop_index('ix_profiles_email', table_name='profiles')
    op.drop_index('ix_profiles_profile_id', table_name='profiles')
    op.drop_table('profiles')
    op.drop_table('roles')
