"""Integration tests for UnitOfWorkSQLAlchemy and the development seed."""

import pytest
from sqlalchemy import inspect

from school.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    display_database_url,
    ensure_sqlite_directory,
)
from school.infrastructure.persistence.sqlalchemy.seed import (
    DEFAULT_SEED_PASSWORD,
    seed_development_data,
)
from school.infrastructure.persistence.sqlalchemy.unit_of_work import (
    UnitOfWorkSQLAlchemy,
)
from school_identity import PasswordHashingService, UserRole, UsernameAlreadyExistsError
from tests.shared.fixtures.factories import TestSchoolFactory, TestUserFactory


class TestUnitOfWorkSQLAlchemy:
    """Tests for the commit boundary."""

    @pytest.mark.asyncio
    async def test_repositories_are_cached(self, session):
        """Each repository is created once per unit of work."""
        uow = UnitOfWorkSQLAlchemy(session)

        assert uow.users is uow.users
        assert uow.courses is uow.courses
        assert uow.session is session

    @pytest.mark.asyncio
    async def test_save_changes_counts_affected_rows(self, session):
        """Inserts, updates and deletes are counted per commit."""
        uow = UnitOfWorkSQLAlchemy(session)
        user = TestUserFactory.alice()
        await uow.users.add(user)
        await uow.student_profiles.add(TestSchoolFactory.student(user.id))

        assert await uow.save_changes() == 2

        user.deactivate()
        await uow.users.update(user)

        assert await uow.save_changes() == 1

    @pytest.mark.asyncio
    async def test_save_changes_without_changes(self, session):
        """Committing nothing affects no rows."""
        uow = UnitOfWorkSQLAlchemy(session)

        assert await uow.save_changes() == 0

    @pytest.mark.asyncio
    async def test_rollback_discards_staged_rows(self, session):
        """Flushed but uncommitted rows disappear on rollback."""
        uow = UnitOfWorkSQLAlchemy(session)
        user = TestUserFactory.alice()
        await uow.users.add(user)

        await uow.rollback()

        assert await uow.users.exists(user.id) is False
        assert await uow.save_changes() == 0

    @pytest.mark.asyncio
    async def test_conflict_keeps_committed_data(self, session):
        """A unique violation rolls back only the uncommitted work."""
        uow = UnitOfWorkSQLAlchemy(session)
        alice = TestUserFactory.alice()
        await uow.users.add(alice)
        await uow.save_changes()

        with pytest.raises(UsernameAlreadyExistsError):
            await uow.users.add(
                TestUserFactory.create("alice", "other@example.com"),
            )

        assert await uow.users.exists(alice.id) is True
        assert await uow.save_changes() == 0


class TestDevelopmentSeed:
    """Tests for seed_development_data."""

    @pytest.mark.asyncio
    async def test_seed_empty_database(self, session):
        """Seeding creates teachers, students and courses once."""
        uow = UnitOfWorkSQLAlchemy(session)
        password_service = PasswordHashingService(
            iterations=PasswordHashingService.MIN_ITERATIONS,
        )

        assert await seed_development_data(uow, password_service) is True

        users = await uow.users.find_all()
        assert len(users) == 5
        assert {u.role for u in users} == {UserRole.TEACHER, UserRole.STUDENT}
        assert len(await uow.teacher_profiles.find_all()) == 2
        assert len(await uow.student_profiles.find_all()) == 3

        courses = await uow.courses.find_all()
        assert {c.title for c in courses} == {
            "Math 101",
            "Physics 101",
            "Chemistry 101",
        }

        teacher1 = await uow.users.find_by_username("teacher1")
        assert password_service.verify(DEFAULT_SEED_PASSWORD, teacher1.password_hash)

    @pytest.mark.asyncio
    async def test_seed_is_skipped_when_users_exist(self, session):
        """Seeding a non-empty database does nothing."""
        uow = UnitOfWorkSQLAlchemy(session)
        await uow.users.add(TestUserFactory.alice())
        await uow.save_changes()

        seeded = await seed_development_data(
            uow,
            PasswordHashingService(iterations=PasswordHashingService.MIN_ITERATIONS),
        )

        assert seeded is False
        assert len(await uow.users.find_all()) == 1


class TestSchemaManagement:
    """Tests for create_tables and helpers."""

    @pytest.mark.asyncio
    async def test_create_tables_is_idempotent(self, sqlite_engine):
        """Creating tables twice keeps the schema intact."""
        await create_tables(sqlite_engine)
        await create_tables(sqlite_engine)

        async with sqlite_engine.connect() as conn:
            tables = await conn.run_sync(
                lambda sync_conn: inspect(sync_conn).get_table_names(),
            )

        assert {
            "users",
            "student_profiles",
            "teacher_profiles",
            "courses",
            "enrollments",
        } <= set(tables)

    def test_display_database_url_hides_credentials(self):
        """Credentials in the URL are not shown."""
        url = "postgresql+asyncpg://school:secret@db:5432/school"

        assert display_database_url(url) == "db:5432/school"

    def test_display_database_url_sqlite(self):
        """SQLite URLs are shown unchanged."""
        url = "sqlite+aiosqlite:///./data/school.db"

        assert display_database_url(url) == url

    def test_ensure_sqlite_directory(self, tmp_path):
        """The parent directory of a SQLite file is created."""
        db_file = tmp_path / "data" / "school.db"

        ensure_sqlite_directory(f"sqlite+aiosqlite:///{db_file}")

        assert db_file.parent.is_dir()

    def test_ensure_sqlite_directory_ignores_other_backends(self, tmp_path):
        """In-memory and server databases touch no directories."""
        ensure_sqlite_directory("sqlite+aiosqlite:///:memory:")
        ensure_sqlite_directory("postgresql+asyncpg://school@db/school")

        assert list(tmp_path.iterdir()) == []
