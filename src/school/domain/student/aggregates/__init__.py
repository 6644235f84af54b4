from school.domain.student.aggregates.student_profile import StudentProfile

__all__ = ["StudentProfile"]
