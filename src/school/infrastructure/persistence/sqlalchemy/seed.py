"""Development seed data.

Creates two teachers, three students and three courses on an empty
database. Every seeded user shares ``DEFAULT_SEED_PASSWORD``.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from school.domain.course import Course
from school.domain.shared.time import today_utc, years_before
from school.domain.student import StudentProfile
from school.domain.teacher import TeacherProfile
from school_identity.domain.user import User, UserRole

if TYPE_CHECKING:
    from school.application.ports import UnitOfWork
    from school_identity.services import PasswordHashingService

logger = logging.getLogger(__name__)

DEFAULT_SEED_PASSWORD = "password123"

_TEACHERS = [
    ("teacher1", "t1@example.com", "Teacher One", 5),
    ("teacher2", "t2@example.com", "Teacher Two", 3),
]

_STUDENTS = [
    ("student1", "s1@example.com", "Student One", 20),
    ("student2", "s2@example.com", "Student Two", 19),
    ("student3", "s3@example.com", "Student Three", 21),
]


async def seed_development_data(
    unit_of_work: UnitOfWork,
    password_service: PasswordHashingService,
) -> bool:
    """Insert the development data set unless users already exist.

    Returns
    -------
    True if data was inserted, False if the database was not empty.
    """
    if await unit_of_work.users.find_all():
        logger.info("Database already contains users, skipping seed")
        return False

    today = today_utc()
    password_hash = password_service.hash(DEFAULT_SEED_PASSWORD)

    teacher_users = [
        User.create(username, email, password_hash, UserRole.TEACHER)
        for username, email, _, _ in _TEACHERS
    ]
    for user in teacher_users:
        await unit_of_work.users.add(user)
    await unit_of_work.save_changes()

    teachers = [
        TeacherProfile.create(user.id, full_name, years_before(today, years))
        for user, (_, _, full_name, years) in zip(teacher_users, _TEACHERS)
    ]
    for teacher in teachers:
        await unit_of_work.teacher_profiles.add(teacher)
    await unit_of_work.save_changes()

    student_users = [
        User.create(username, email, password_hash, UserRole.STUDENT)
        for username, email, _, _ in _STUDENTS
    ]
    for user in student_users:
        await unit_of_work.users.add(user)
    await unit_of_work.save_changes()

    for user, (_, _, full_name, years) in zip(student_users, _STUDENTS):
        await unit_of_work.student_profiles.add(
            StudentProfile.create(user.id, full_name, years_before(today, years)),
        )
    await unit_of_work.save_changes()

    courses = [
        Course.create("Math 101", teachers[0].id, today - timedelta(days=10)),
        Course.create("Physics 101", teachers[1].id, today - timedelta(days=5)),
        Course.create("Chemistry 101", teachers[0].id, today + timedelta(days=1)),
    ]
    for course in courses:
        await unit_of_work.courses.add(course)
    await unit_of_work.save_changes()

    logger.info(
        "Seeded %d teachers, %d students and %d courses",
        len(teachers),
        len(student_users),
        len(courses),
    )
    return True
