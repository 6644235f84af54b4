from school.domain.enrollment.aggregates.enrollment import Enrollment

__all__ = ["Enrollment"]
