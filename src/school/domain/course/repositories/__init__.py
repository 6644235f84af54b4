from school.domain.course.repositories.course_repository import CourseRepository

__all__ = ["CourseRepository"]
