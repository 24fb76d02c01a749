"""
Building blocks shared by the request schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, ClassVar, FrozenSet

from pydantic import AfterValidator, BaseModel, model_validator

from ...database.base import as_naive_utc

# Client datetimes may carry any offset; they are stored as naive UTC
UTCDatetime = Annotated[datetime, AfterValidator(as_naive_utc)]


class PartialUpdate(BaseModel):
    """A request that changes only the fields it sends.

    Routers apply ``model_dump(exclude_unset=True)``, so an explicit ``null``
    would reach the column. Only fields named in ``CLEARABLE`` may be null.
    """

    CLEARABLE: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_nulls(self):
        nulled = sorted(
            name for name in self.model_fields_set if getattr(self, name) is None and name not in self.CLEARABLE
        )
        if nulled:
            raise ValueError(f"{', '.join(nulled)} cannot be null")
        return self
