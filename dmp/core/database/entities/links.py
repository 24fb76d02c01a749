"""
Many-to-many association tables.

Each link table holds a composite primary key of the two foreign keys it
joins. Links are hard-deleted; only the entities on either side are
soft-deleted.
"""

from sqlmodel import Field, SQLModel


class UserProjectLink(SQLModel, table=True):
    """Explicit access grant of a user on a project."""

    __tablename__ = "user_projects"

    user_id: str = Field(foreign_key="users.id", primary_key=True)
    project_id: int = Field(foreign_key="projects.id", primary_key=True)


class MeetingUserLink(SQLModel, table=True):
    __tablename__ = "meeting_user_assignments"

    meeting_id: int = Field(foreign_key="meetings.id", primary_key=True)
    user_id: str = Field(foreign_key="users.id", primary_key=True)


class MeetingTagLink(SQLModel, table=True):
    __tablename__ = "meeting_tag_assignments"

    meeting_id: int = Field(foreign_key="meetings.id", primary_key=True)
    tag_id: int = Field(foreign_key="tags.id", primary_key=True)


class TopicUserLink(SQLModel, table=True):
    __tablename__ = "user_topic_assignments"

    topic_id: int = Field(foreign_key="topics.id", primary_key=True)
    user_id: str = Field(foreign_key="users.id", primary_key=True)


class TopicTagLink(SQLModel, table=True):
    __tablename__ = "topic_tag_assignments"

    topic_id: int = Field(foreign_key="topics.id", primary_key=True)
    tag_id: int = Field(foreign_key="tags.id", primary_key=True)


class TopicActionLink(SQLModel, table=True):
    """Relation between an action and the topics it was derived from."""

    __tablename__ = "topic_action_assignments"

    topic_id: int = Field(foreign_key="topics.id", primary_key=True)
    action_id: int = Field(foreign_key="actions.id", primary_key=True)


class ActionUserLink(SQLModel, table=True):
    __tablename__ = "action_user_assignments"

    action_id: int = Field(foreign_key="actions.id", primary_key=True)
    user_id: str = Field(foreign_key="users.id", primary_key=True)


class ActionTagLink(SQLModel, table=True):
    __tablename__ = "action_tag_assignments"

    action_id: int = Field(foreign_key="actions.id", primary_key=True)
    tag_id: int = Field(foreign_key="tags.id", primary_key=True)
