from typing import List

from optional_records.calculation.grades import calculate_average_grade
from optional_records.lookup.finder import find_course, find_student
from optional_records.models.course import Course
from optional_records.models.student import Student


def run(student_name: str = "Alice", course_title: str = "Core Java") -> List[str]:
    """Grades a student in a course, only when both lookups succeed."""
    students = [Student("Alice", 20)]
    courses = [Course("Core Java")]
    lines: List[str] = []

    student = find_student(students, student_name)
    course = find_course(courses, course_title)
    average_grade = calculate_average_grade(student, course)
    average_grade.if_present(lambda grade: lines.append(f"Average grade : {grade}"))
    return lines
