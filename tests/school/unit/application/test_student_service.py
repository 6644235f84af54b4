"""Unit tests for StudentService."""

from datetime import date
from uuid import uuid4

import pytest

from school.application.services import StudentService
from school.domain.shared.exceptions import ValidationError
from school.domain.student import StudentProfileAlreadyExistsError
from school_identity import UserNotFoundError
from tests.shared.fixtures.factories import TestSchoolFactory
from tests.shared.fixtures.mocks import make_unit_of_work


class TestStudentServiceCreate:
    """Tests for create_student."""

    def setup_method(self):
        """Set up test fixtures."""
        self.uow = make_unit_of_work()
        self.service = StudentService(self.uow)
        self.user_id = uuid4()

    @pytest.mark.asyncio
    async def test_create_student_success(self):
        """A profile is created for an existing user without one."""
        self.uow.users.exists.return_value = True

        student = await self.service.create_student(
            self.user_id,
            "Alice Liddell",
            date(2005, 5, 17),
        )

        assert student.user_id == self.user_id
        assert student.full_name == "Alice Liddell"
        self.uow.student_profiles.add.assert_awaited_once_with(student)
        self.uow.save_changes.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_student_unknown_user(self):
        """The referenced user must exist."""
        self.uow.users.exists.return_value = False

        with pytest.raises(UserNotFoundError):
            await self.service.create_student(self.user_id, "Alice", date(2005, 5, 17))

        self.uow.student_profiles.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_student_duplicate_profile(self):
        """A user can have only one student profile."""
        self.uow.users.exists.return_value = True
        self.uow.student_profiles.find_by_user_id.return_value = (
            TestSchoolFactory.student(self.user_id)
        )

        with pytest.raises(StudentProfileAlreadyExistsError):
            await self.service.create_student(self.user_id, "Alice", date(2005, 5, 17))

        self.uow.save_changes.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_student_validates_before_lookup(self):
        """Invalid input fails before any repository call."""
        with pytest.raises(ValidationError):
            await self.service.create_student(self.user_id, "A", date(2005, 5, 17))

        self.uow.users.exists.assert_not_awaited()


class TestStudentServiceUpdateDelete:
    """Tests for update_student and delete_student."""

    def setup_method(self):
        """Set up test fixtures."""
        self.uow = make_unit_of_work()
        self.service = StudentService(self.uow)
        self.student = TestSchoolFactory.student(uuid4())

    @pytest.mark.asyncio
    async def test_update_student(self):
        """The full name is replaced and persisted."""
        self.uow.student_profiles.find_by_id.return_value = self.student

        updated = await self.service.update_student(self.student.id, "Alice L.")

        assert updated is self.student
        assert updated.full_name == "Alice L."
        self.uow.student_profiles.update.assert_awaited_once_with(self.student)
        self.uow.save_changes.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_missing_student(self):
        """Updating an unknown student returns None."""
        assert await self.service.update_student(uuid4(), "Alice") is None
        self.uow.save_changes.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_student_removes_enrollments(self):
        """Deleting a student also deletes their enrollments."""
        enrollments = [
            TestSchoolFactory.enrollment(self.student.id, uuid4()),
            TestSchoolFactory.enrollment(self.student.id, uuid4()),
        ]
        self.uow.student_profiles.find_by_id.return_value = self.student
        self.uow.enrollments.find_by_student.return_value = enrollments

        assert await self.service.delete_student(self.student.id) is True

        assert self.uow.enrollments.delete.await_count == 2
        self.uow.student_profiles.delete.assert_awaited_once_with(self.student)
        self.uow.save_changes.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_missing_student(self):
        """Deleting an unknown student returns False."""
        assert await self.service.delete_student(uuid4()) is False
        self.uow.student_profiles.delete.assert_not_awaited()


class TestStudentServiceQueries:
    """Tests for read operations."""

    def setup_method(self):
        """Set up test fixtures."""
        self.uow = make_unit_of_work()
        self.service = StudentService(self.uow)

    @pytest.mark.asyncio
    async def test_queries_delegate_to_repository(self):
        """Read operations pass through to the student repository."""
        student = TestSchoolFactory.student(uuid4())
        self.uow.student_profiles.find_all.return_value = [student]
        self.uow.student_profiles.find_active.return_value = [student]
        self.uow.student_profiles.find_with_enrollments.return_value = student
        self.uow.student_profiles.exists.return_value = True

        assert await self.service.list_students() == [student]
        assert await self.service.list_active_students() == [student]
        assert await self.service.get_student_with_enrollments(student.id) is student
        assert await self.service.student_exists(student.id) is True
        assert await self.service.get_student(uuid4()) is None
