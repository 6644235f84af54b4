from school.domain.teacher.aggregates.teacher_profile import TeacherProfile

__all__ = ["TeacherProfile"]
