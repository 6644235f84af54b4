from school.domain.enrollment.value_objects.grade import Grade, GradeInput

__all__ = ["Grade", "GradeInput"]
