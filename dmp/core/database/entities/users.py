"""
User entity model.

Users are provisioned the first time a valid bearer token for them is seen.
Their primary key is the identifier issued by the identity provider.
"""

from typing import Optional

from sqlmodel import Field

from ..base import Base, TimestampMixin


NAME_MAX_LENGTH = 64


class UserBase(Base):
    """Base fields for a user."""

    name: str = Field(max_length=NAME_MAX_LENGTH, unique=True, index=True, description="Display name, unique across users")


class User(UserBase, TimestampMixin, table=True):
    """A user which can log in.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[str] = Field(default=None, primary_key=True, max_length=128)

    def __repr__(self) -> str:
        return f"User(id={self.id}, name={self.name})"
