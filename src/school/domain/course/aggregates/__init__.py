from school.domain.course.aggregates.course import Course

__all__ = ["Course"]
