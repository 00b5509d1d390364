from typing import Callable

from loguru import logger

from optional_records.calculation.combinators import combine
from optional_records.config.settings import settings
from optional_records.models.course import Course
from optional_records.models.option import Option
from optional_records.models.student import Student

Grader = Callable[[Student, Course], float]


def compute_average_grade(student: Student, course: Course) -> float:
    """Placeholder grader: returns the configured fixed grade for any input."""
    return settings.placeholder_grade


def calculate_average_grade(
    student_opt: Option[Student],
    course_opt: Option[Course],
    grader: Grader = compute_average_grade,
) -> Option[float]:
    """
    Grades a student in a course when both were found.

    Args:
        student_opt: Result of a student lookup.
        course_opt: Result of a course lookup.
        grader: Computes the grade. Only called when both are present.

    Returns:
        Present(grade), or Absent if either lookup came back empty.
    """
    result = combine(student_opt, course_opt, grader)
    if result.is_absent():
        logger.debug("Grade not computed: student or course missing")
    return result
