"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


ENUMS = {
    'subscription_plan': ('free', 'pro'),
    'difficulty': ('beginner', 'intermediate', 'advanced'),
    'moderation_status': ('approved', 'rejected'),
    'context_type': ('tutorial', 'project', 'general'),
    'challenge_type': ('tutorial', 'quiz', 'project'),
}


def _enum(name: str) -> sa.Enum:
    # PostgreSQL types are created once up front; tables only reference them
    return sa.Enum(*ENUMS[name], name=name).with_variant(
        postgresql.ENUM(*ENUMS[name], name=name, create_type=False), 'postgresql'
    )


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    """Create every ThinkHub table."""
    bind = op.get_bind()
    if bind.dialect.name == 'postgresql':
        for name, values in ENUMS.items():
            postgresql.ENUM(*values, name=name).create(bind, checkfirst=True)

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('full_name', sa.String(), nullable=False),
        sa.Column('avatar_url', sa.String(), nullable=True),
        sa.Column('subscription_plan', _enum('subscription_plan'), nullable=False),
        sa.Column('subscription_expires_at', sa.DateTime(), nullable=True),
        sa.Column('ai_queries_used_today', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('ai_queries_reset_on', sa.Date(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table(
        'tutorials',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('slug', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('tech_stack', sa.JSON(), nullable=False),
        sa.Column('difficulty', _enum('difficulty'), nullable=False),
        sa.Column('estimated_time', sa.Integer(), nullable=False),
        sa.Column('thumbnail_url', sa.String(), nullable=True),
        sa.Column('is_pro', sa.Boolean(), nullable=False),
        sa.Column('likes_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('views_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('moderation_status', _enum('moderation_status'), nullable=False, server_default='approved'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_tutorials_id'), 'tutorials', ['id'], unique=False)
    op.create_index(op.f('ix_tutorials_slug'), 'tutorials', ['slug'], unique=True)

    op.create_table(
        'projects',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('slug', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('tech_stack', sa.JSON(), nullable=False),
        sa.Column('difficulty', _enum('difficulty'), nullable=False),
        sa.Column('preview_image_url', sa.String(), nullable=True),
        sa.Column('demo_url', sa.String(), nullable=True),
        sa.Column('github_url', sa.String(), nullable=True),
        sa.Column('guide_pdf_url', sa.String(), nullable=True),
        sa.Column('is_pro', sa.Boolean(), nullable=False),
        sa.Column('download_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('moderation_status', _enum('moderation_status'), nullable=False, server_default='approved'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_projects_id'), 'projects', ['id'], unique=False)
    op.create_index(op.f('ix_projects_slug'), 'projects', ['slug'], unique=True)

    op.create_table(
        'resources',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('file_url', sa.String(), nullable=False),
        sa.Column('file_size', sa.Integer(), nullable=False),
        sa.Column('file_type', sa.String(), nullable=False),
        sa.Column('thumbnail_url', sa.String(), nullable=True),
        sa.Column('is_pro', sa.Boolean(), nullable=False),
        sa.Column('download_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('moderation_status', _enum('moderation_status'), nullable=False, server_default='approved'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_resources_id'), 'resources', ['id'], unique=False)
    op.create_index(op.f('ix_resources_category'), 'resources', ['category'], unique=False)

    op.create_table(
        'roadmaps',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('nodes', sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_roadmaps_id'), 'roadmaps', ['id'], unique=False)

    op.create_table(
        'user_likes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('tutorial_id', sa.Integer(), sa.ForeignKey('tutorials.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'tutorial_id', name='uq_user_like_user_tutorial'),
    )
    op.create_index(op.f('ix_user_likes_id'), 'user_likes', ['id'], unique=False)
    op.create_index(op.f('ix_user_likes_user_id'), 'user_likes', ['user_id'], unique=False)
    op.create_index(op.f('ix_user_likes_tutorial_id'), 'user_likes', ['tutorial_id'], unique=False)

    op.create_table(
        'user_downloads',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('resource_id', sa.Integer(), sa.ForeignKey('resources.id'), nullable=True),
        sa.Column('project_id', sa.Integer(), sa.ForeignKey('projects.id'), nullable=True),
        sa.Column('downloaded_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_user_downloads_id'), 'user_downloads', ['id'], unique=False)
    op.create_index(op.f('ix_user_downloads_user_id'), 'user_downloads', ['user_id'], unique=False)

    op.create_table(
        'user_progress',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('tutorial_id', sa.Integer(), sa.ForeignKey('tutorials.id'), nullable=True),
        sa.Column('roadmap_id', sa.Integer(), sa.ForeignKey('roadmaps.id'), nullable=True),
        sa.Column('progress_percentage', sa.Float(), nullable=False),
        sa.Column('completed_nodes', sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'tutorial_id', name='uq_progress_user_tutorial'),
        sa.UniqueConstraint('user_id', 'roadmap_id', name='uq_progress_user_roadmap'),
    )
    op.create_index(op.f('ix_user_progress_id'), 'user_progress', ['id'], unique=False)
    op.create_index(op.f('ix_user_progress_user_id'), 'user_progress', ['user_id'], unique=False)

    op.create_table(
        'chat_messages',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('response', sa.Text(), nullable=False),
        sa.Column('context_type', _enum('context_type'), nullable=True),
        sa.Column('context_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_chat_messages_id'), 'chat_messages', ['id'], unique=False)
    op.create_index(op.f('ix_chat_messages_user_id'), 'chat_messages', ['user_id'], unique=False)

    op.create_table(
        'challenges',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('type', _enum('challenge_type'), nullable=False),
        sa.Column('points_reward', sa.Integer(), nullable=False),
        sa.Column('tutorial_id', sa.Integer(), sa.ForeignKey('tutorials.id'), nullable=True),
        sa.Column('project_id', sa.Integer(), sa.ForeignKey('projects.id'), nullable=True),
        sa.Column('quiz_data', sa.JSON(), nullable=True),
        sa.Column('start_date', sa.DateTime(), nullable=False),
        sa.Column('end_date', sa.DateTime(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_challenges_id'), 'challenges', ['id'], unique=False)

    op.create_table(
        'user_points',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('challenge_id', sa.Integer(), sa.ForeignKey('challenges.id'), nullable=False),
        sa.Column('points_earned', sa.Integer(), nullable=False),
        sa.Column('earned_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'challenge_id', name='uq_user_points_user_challenge'),
    )
    op.create_index(op.f('ix_user_points_id'), 'user_points', ['id'], unique=False)
    op.create_index(op.f('ix_user_points_user_id'), 'user_points', ['user_id'], unique=False)

    op.create_table(
        'certificates',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('challenge_id', sa.Integer(), sa.ForeignKey('challenges.id'), nullable=False),
        sa.Column('certificate_url', sa.String(), nullable=False),
        sa.Column('issued_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'challenge_id', name='uq_certificate_user_challenge'),
    )
    op.create_index(op.f('ix_certificates_id'), 'certificates', ['id'], unique=False)
    op.create_index(op.f('ix_certificates_user_id'), 'certificates', ['user_id'], unique=False)


def downgrade() -> None:
    """Drop every ThinkHub table."""
    for table in (
        'certificates',
        'user_points',
        'challenges',
        'chat_messages',
        'user_progress',
        'user_downloads',
        'user_likes',
        'roadmaps',
        'resources',
        'projects',
        'tutorials',
        'users',
    ):
        op.drop_table(table)

    bind = op.get_bind()
    if bind.dialect.name == 'postgresql':
        for name, values in ENUMS.items():
            postgresql.ENUM(*values, name=name).drop(bind, checkfirst=True)
