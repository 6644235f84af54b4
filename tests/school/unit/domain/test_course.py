"""Tests for the Course aggregate."""

from datetime import date, datetime, timezone
from uuid import uuid4

import pytest

from school.domain.course import Course
from school.domain.shared.exceptions import ErrorCode, ValidationError
from school.domain.teacher import TeacherProfile


class TestCourseCreation:
    """Test cases for Course.create."""

    def setup_method(self):
        """Set up a teacher reference for each test."""
        self.teacher_id = uuid4()

    def test_create_valid_course(self):
        """Test creating a course with all fields."""
        course = Course.create(
            title="Math 101",
            teacher_profile_id=self.teacher_id,
            start_date=date(2025, 9, 1),
            description="Introduction to algebra",
        )

        assert course.title == "Math 101"
        assert course.teacher_profile_id == self.teacher_id
        assert course.start_date == date(2025, 9, 1)
        assert course.description == "Introduction to algebra"
        assert course.teacher is None
        assert course.enrollments == ()

    def test_start_date_may_lie_in_the_past_or_future(self):
        """Test that any start date is accepted."""
        past = Course.create("Math 101", self.teacher_id, date(1999, 1, 1))
        future = Course.create("Math 101", self.teacher_id, date(2099, 1, 1))

        assert past.start_date == date(1999, 1, 1)
        assert future.start_date == date(2099, 1, 1)

    def test_blank_description_becomes_none(self):
        """Test that a whitespace description is dropped."""
        course = Course.create("Math 101", self.teacher_id, date(2025, 9, 1), "   ")

        assert course.description is None

    def test_title_is_trimmed(self):
        """Test that the title is trimmed."""
        course = Course.create("  Math 101 ", self.teacher_id, date(2025, 9, 1))

        assert course.title == "Math 101"

    @pytest.mark.parametrize("title", ["", " ", None])
    def test_missing_title_error(self, title):
        """Test that a title is required."""
        with pytest.raises(ValidationError, match="Course title is required"):
            Course.create(title, self.teacher_id, date(2025, 9, 1))

    def test_short_title_error(self):
        """Test the minimum title length."""
        with pytest.raises(ValidationError, match="at least 2 characters"):
            Course.create("M", self.teacher_id, date(2025, 9, 1))

    def test_long_description_error(self):
        """Test the maximum description length."""
        with pytest.raises(ValidationError, match="cannot exceed 2000 characters"):
            Course.create("Math 101", self.teacher_id, date(2025, 9, 1), "x" * 2001)

    def test_missing_start_date_error(self):
        """Test that the start date is required."""
        with pytest.raises(ValidationError) as exc_info:
            Course.create("Math 101", self.teacher_id, None)  # type: ignore[arg-type]

        assert exc_info.value.code == ErrorCode.INVALID_DATE

    def test_missing_teacher_error(self):
        """Test that a teacher reference is required."""
        with pytest.raises(ValidationError, match="Teacher profile ID is required"):
            Course.create("Math 101", None, date(2025, 9, 1))  # type: ignore[arg-type]


class TestCourseUpdate:
    """Test cases for changing a course."""

    def setup_method(self):
        """Create a course for each test."""
        self.teacher_id = uuid4()
        self.course = Course.create(
            "Math 101",
            self.teacher_id,
            date(2025, 9, 1),
            "Algebra",
        )

    def test_update_fields(self):
        """Test updating title, description and start date."""
        self.course.update_title("Math 102")
        self.course.update_description(None)
        self.course.update_start_date(datetime(2026, 2, 1, 8, tzinfo=timezone.utc))

        assert self.course.title == "Math 102"
        assert self.course.description is None
        assert self.course.start_date == date(2026, 2, 1)
        assert self.course.updated_at is not None

    def test_assign_teacher_changes_reference(self):
        """Test reassigning the course to another teacher."""
        new_teacher = uuid4()

        self.course.assign_teacher(new_teacher)

        assert self.course.teacher_profile_id == new_teacher

    def test_assign_teacher_drops_stale_loaded_teacher(self):
        """Test that a loaded teacher is cleared when the reference changes."""
        teacher = TeacherProfile.create(uuid4(), "Grace Hopper", date(2015, 9, 1))
        course = Course.reconstitute(
            id=uuid4(),
            title="Math 101",
            description=None,
            start_date=date(2025, 9, 1),
            teacher_profile_id=teacher.id,
            created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
            updated_at=None,
            teacher=teacher,
        )

        course.assign_teacher(uuid4())

        assert course.teacher is None

    def test_assign_invalid_teacher_error(self):
        """Test that an invalid teacher reference is rejected."""
        with pytest.raises(ValidationError):
            self.course.assign_teacher("nope")

        assert self.course.teacher_profile_id == self.teacher_id
