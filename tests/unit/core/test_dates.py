"""Tests for the UTC timestamp helpers and the timestamps they feed."""

from datetime import datetime, timedelta, timezone

from app.core.dates import as_utc, utcnow
from app.models.password_reset import PasswordResetCode
from app.models.user import User


class TestAsUtc:

    def test_naive_is_read_as_utc(self):
        assert as_utc(datetime(2026, 3, 1, 9, 0)) == datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)

    def test_other_offset_is_converted(self):
        kst = timezone(timedelta(hours=9))
        converted = as_utc(datetime(2026, 3, 1, 18, 0, tzinfo=kst))
        assert converted == datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)
        assert converted.tzinfo == timezone.utc

    def test_none(self):
        assert as_utc(None) is None


class TestModelTimestamps:

    def test_user_defaults_are_aware(self):
        user = User(email="a@b.co", password_hash="x")
        assert user.created_at.tzinfo is not None
        assert user.updated_at.tzinfo is not None

    def test_utcnow_is_aware(self):
        assert utcnow().utcoffset() == timedelta(0)

    def test_reset_code_compares_naive_stored_value(self):
        """A value read back from SQLite has no offset; it still compares against an aware now."""
        entry = PasswordResetCode(email="a@b.co", code="123456", expires_at=datetime(2026, 3, 1, 9, 10))
        assert entry.is_active(datetime(2026, 3, 1, 9, 9, 59, tzinfo=timezone.utc))
        assert not entry.is_active(datetime(2026, 3, 1, 9, 10, tzinfo=timezone.utc))
