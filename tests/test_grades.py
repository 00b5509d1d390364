from optional_records.calculation.grades import calculate_average_grade, compute_average_grade
from optional_records.lookup.finder import find_course, find_student
from optional_records.models.course import Course
from optional_records.models.option import absent, present
from optional_records.models.student import Student


def test_placeholder_grade_is_fixed():
    assert compute_average_grade(Student("Alice", 20), Course("Core Java")) == 85.5
    assert compute_average_grade(Student("Bob", 99), Course("Other")) == 85.5


def test_grade_when_both_found(students, courses):
    grade = calculate_average_grade(
        find_student(students, "alice"), find_course(courses, "Core Java")
    )
    assert grade == present(85.5)


def test_no_grade_when_either_missing(students, courses):
    assert calculate_average_grade(find_student(students, "Suresh"), find_course(courses, "Core Java")) == absent()
    assert calculate_average_grade(find_student(students, "Alice"), find_course(courses, "Rust")) == absent()


def test_grader_is_pluggable(students, courses):
    grade = calculate_average_grade(
        find_student(students, "Bob"),
        find_course(courses, "Python Basics"),
        grader=lambda student, course: float(student.age + len(course.title)),
    )
    assert grade == present(34.0)
