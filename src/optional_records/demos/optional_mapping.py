from typing import List, Optional

from optional_records.calculation.combinators import transform
from optional_records.config.settings import settings
from optional_records.lookup.finder import find_student
from optional_records.models.student import Student


def run(query: Optional[str] = None) -> List[str]:
    """Upper-cases the name of a found student. Prints nothing on a miss."""
    students = [
        Student("Alice", 20),
        Student("Bob", 21),
        Student("Charlie", 22),
        Student("Alice", 27),
    ]
    lines: List[str] = []

    found_student = find_student(students, query or settings.default_query)
    upper_case_name = transform(found_student, lambda s: s.name.upper())
    upper_case_name.if_present(lambda name: lines.append(f"Name is {name}"))
    return lines
