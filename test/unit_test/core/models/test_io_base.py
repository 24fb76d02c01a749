"""
Unit tests for the shared request schema helpers.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest
from pydantic import BaseModel, ValidationError

from dmp.core.database.base import as_naive_utc
from dmp.core.models.io.base import PartialUpdate, UTCDatetime


class _Update(PartialUpdate):
    CLEARABLE = frozenset({"due"})

    title: Optional[str] = None
    due: Optional[UTCDatetime] = None


class _Event(BaseModel):
    at: UTCDatetime


class TestPartialUpdate:
    def test_omitted_fields_are_fine(self):
        assert _Update().model_dump(exclude_unset=True) == {}

    def test_null_for_required_column_rejected(self):
        with pytest.raises(ValidationError, match="title cannot be null"):
            _Update(title=None)

    def test_clearable_field_accepts_null(self):
        assert _Update(due=None).model_dump(exclude_unset=True) == {"due": None}


class TestUTCDatetime:
    def test_naive_kept_as_is(self):
        assert _Event(at="2026-04-01T09:00:00").at == datetime(2026, 4, 1, 9)

    def test_offset_converted_to_naive_utc(self):
        event = _Event(at="2026-04-01T11:00:00+02:00")

        assert event.at == datetime(2026, 4, 1, 9)
        assert event.at.tzinfo is None

    def test_as_naive_utc(self):
        aware = datetime(2026, 1, 1, 0, 30, tzinfo=timezone(timedelta(hours=1)))
        assert as_naive_utc(aware) == datetime(2025, 12, 31, 23, 30)
