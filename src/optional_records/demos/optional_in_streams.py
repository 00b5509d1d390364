from typing import List

from optional_records.calculation.aggregation import average_age, oldest_student
from optional_records.config.settings import settings
from optional_records.models.student import Student


def run() -> List[str]:
    """Average age over a filtered set, and the oldest student by a pairwise fold."""
    students = [
        Student("Alice", 120),
        Student("Bob", 21),
        Student("Charlie", 22),
        Student("David", 23),
    ]
    threshold = settings.age_threshold
    lines = [
        f"Average age of students over {threshold} : {average_age(students, threshold)}"
    ]

    oldest = oldest_student(students)
    oldest.if_present(lambda student: lines.append(f"Student name is : {student.name}"))
    return lines
