"""Tests for the TeacherProfile aggregate."""

from datetime import date, timedelta
from uuid import uuid4

import pytest

from school.domain.shared.exceptions import ErrorCode, ValidationError
from school.domain.shared.time import today_utc, years_before
from school.domain.teacher import TeacherProfile


class TestTeacherProfile:
    """Test cases for TeacherProfile aggregate."""

    def setup_method(self):
        """Set up a user id for each test."""
        self.user_id = uuid4()

    def test_create_valid_teacher(self):
        """Test creating a teacher with valid data."""
        teacher = TeacherProfile.create(self.user_id, "Grace Hopper", date(2015, 9, 1))

        assert teacher.user_id == self.user_id
        assert teacher.full_name == "Grace Hopper"
        assert teacher.hire_date == date(2015, 9, 1)
        assert teacher.courses == ()
        assert teacher.updated_at is None

    def test_hire_date_today_is_allowed(self):
        """Test that a teacher can be hired today."""
        teacher = TeacherProfile.create(self.user_id, "Grace Hopper", today_utc())

        assert teacher.hire_date == today_utc()

    def test_hire_date_in_future_error(self):
        """Test that a future hire date is rejected."""
        tomorrow = today_utc() + timedelta(days=1)

        with pytest.raises(ValidationError, match="cannot be in the future") as exc_info:
            TeacherProfile.create(self.user_id, "Grace Hopper", tomorrow)

        assert exc_info.value.code == ErrorCode.INVALID_DATE

    def test_hire_date_too_old_error(self):
        """Test that hire dates more than 50 years ago are unrealistic."""
        too_old = years_before(today_utc(), 50) - timedelta(days=1)

        with pytest.raises(ValidationError, match="not realistic"):
            TeacherProfile.create(self.user_id, "Grace Hopper", too_old)

    def test_short_full_name_error(self):
        """Test the minimum full name length."""
        with pytest.raises(ValidationError, match="at least 2 characters"):
            TeacherProfile.create(self.user_id, "G", date(2015, 9, 1))

    def test_update_full_name(self):
        """Test renaming a teacher."""
        teacher = TeacherProfile.create(self.user_id, "Grace", date(2015, 9, 1))

        teacher.update_full_name("Grace Hopper")

        assert teacher.full_name == "Grace Hopper"
        assert teacher.updated_at is not None

    def test_hire_date_never_changes(self):
        """Test that the profile offers no way to change the hire date."""
        teacher = TeacherProfile.create(self.user_id, "Grace", date(2015, 9, 1))

        with pytest.raises(AttributeError):
            teacher.hire_date = date(2016, 1, 1)  # type: ignore[misc]
