"""Initial schema for the DMP meeting planner

Revision ID: 20260101_000000
Revises: None
Create Date: 2026-01-01 00:00:00.000000

This is the initial migration that creates all tables of the DMP backend:
- Users, projects and explicit project grants
- Meetings, topics, actions and comments
- Tags, priorities and their assignments
- Notifications

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20260101_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column("deleted_at", sa.DateTime(), nullable=True),
    ]


def _link_table(name: str, left: str, left_type, left_target: str, right: str, right_type, right_target: str) -> None:
    op.create_table(
        name,
        sa.Column(left, left_type, nullable=False),
        sa.Column(right, right_type, nullable=False),
        sa.ForeignKeyConstraint([left], [left_target]),
        sa.ForeignKeyConstraint([right], [right_target]),
        sa.PrimaryKeyConstraint(left, right),
    )


def upgrade() -> None:
    """Create all tables."""

    op.create_table(
        "users",
        sa.Column("id", sa.String(128), nullable=False),
        sa.Column("name", sa.String(64), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_name", "users", ["name"], unique=True)
    op.create_index("ix_users_deleted_at", "users", ["deleted_at"])

    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(36), nullable=False),
        sa.Column("description", sa.String(256), nullable=False),
        sa.Column("preview_url", sa.String(), nullable=False),
        sa.Column("ai_enabled", sa.Boolean(), nullable=False),
        sa.Column("owner_id", sa.String(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_projects_owner_id", "projects", ["owner_id"])
    op.create_index("ix_projects_deleted_at", "projects", ["deleted_at"])

    _link_table("user_projects", "user_id", sa.String(), "users.id", "project_id", sa.Integer(), "projects.id")

    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(32), nullable=False),
        sa.Column("color", sa.String(7), nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_tags_project_id", "tags", ["project_id"])
    op.create_index("ix_tags_deleted_at", "tags", ["deleted_at"])

    op.create_table(
        "priorities",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(32), nullable=False),
        sa.Column("weight", sa.Integer(), nullable=False),
        sa.Column("color", sa.String(7), nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_priorities_project_id", "priorities", ["project_id"])
    op.create_index("ix_priorities_deleted_at", "priorities", ["deleted_at"])

    op.create_table(
        "meetings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(64), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("start_date", sa.DateTime(), nullable=False),
        sa.Column("end_date", sa.DateTime(), nullable=True),
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.Column("creator_id", sa.String(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"]),
        sa.ForeignKeyConstraint(["creator_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_meetings_project_id", "meetings", ["project_id"])
    op.create_index("ix_meetings_start_date", "meetings", ["start_date"])
    op.create_index("ix_meetings_deleted_at", "meetings", ["deleted_at"])

    op.create_table(
        "topics",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(128), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("force_solution", sa.Boolean(), nullable=False),
        sa.Column("meeting_id", sa.Integer(), nullable=False),
        sa.Column("creator_id", sa.String(), nullable=False),
        sa.Column("priority_id", sa.Integer(), nullable=True),
        sa.Column("solution_id", sa.Integer(), nullable=True),
        sa.Column("closed_at", sa.DateTime(), nullable=True),
        sa.Column("order_index", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["meeting_id"], ["meetings.id"]),
        sa.ForeignKeyConstraint(["creator_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["priority_id"], ["priorities.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_topics_meeting_id", "topics", ["meeting_id"])
    op.create_index("ix_topics_deleted_at", "topics", ["deleted_at"])

    op.create_table(
        "actions",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(128), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("due_date", sa.DateTime(), nullable=True),
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.Column("creator_id", sa.String(), nullable=False),
        sa.Column("priority_id", sa.Integer(), nullable=True),
        sa.Column("closed_at", sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"]),
        sa.ForeignKeyConstraint(["creator_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["priority_id"], ["priorities.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_actions_project_id", "actions", ["project_id"])
    op.create_index("ix_actions_deleted_at", "actions", ["deleted_at"])

    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_id", sa.String(), nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=True),
        sa.Column("meeting_id", sa.Integer(), nullable=True),
        sa.Column("topic_id", sa.Integer(), nullable=True),
        sa.Column("action_id", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"]),
        sa.ForeignKeyConstraint(["meeting_id"], ["meetings.id"]),
        sa.ForeignKeyConstraint(["topic_id"], ["topics.id"]),
        sa.ForeignKeyConstraint(["action_id"], ["actions.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    for column in ("author_id", "project_id", "meeting_id", "topic_id", "action_id", "deleted_at"):
        op.create_index(f"ix_comments_{column}", "comments", [column])

    _link_table("meeting_user_assignments", "meeting_id", sa.Integer(), "meetings.id", "user_id", sa.String(), "users.id")
    _link_table("meeting_tag_assignments", "meeting_id", sa.Integer(), "meetings.id", "tag_id", sa.Integer(), "tags.id")
    _link_table("user_topic_assignments", "topic_id", sa.Integer(), "topics.id", "user_id", sa.String(), "users.id")
    _link_table("topic_tag_assignments", "topic_id", sa.Integer(), "topics.id", "tag_id", sa.Integer(), "tags.id")
    _link_table("topic_action_assignments", "topic_id", sa.Integer(), "topics.id", "action_id", sa.Integer(), "actions.id")
    _link_table("action_user_assignments", "action_id", sa.Integer(), "actions.id", "user_id", sa.String(), "users.id")
    _link_table("action_tag_assignments", "action_id", sa.Integer(), "actions.id", "tag_id", sa.Integer(), "tags.id")

    op.create_table(
        "notifications",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(128), nullable=False),
        sa.Column("suffix", sa.String(128), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("link", sa.String(), nullable=False),
        sa.Column("link_title", sa.String(64), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("read_at", sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_notifications_user_id", "notifications", ["user_id"])
    op.create_index("ix_notifications_deleted_at", "notifications", ["deleted_at"])


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    for table in (
        "notifications",
        "action_tag_assignments",
        "action_user_assignments",
        "topic_action_assignments",
        "topic_tag_assignments",
        "user_topic_assignments",
        "meeting_tag_assignments",
        "meeting_user_assignments",
        "comments",
        "actions",
        "topics",
        "meetings",
        "priorities",
        "tags",
        "user_projects",
        "projects",
        "users",
    ):
        op.drop_table(table)
