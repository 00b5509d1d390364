from typing import List, Optional

from optional_records.config.settings import settings
from optional_records.lookup.finder import find_student
from optional_records.models.student import Student


def run(query: Optional[str] = None) -> List[str]:
    """Looks a student up and reports either branch without crashing."""
    students = [Student("Alice", 20), Student("Bob", 21), Student("Charlie", 22)]
    lines: List[str] = []

    found_student = find_student(students, query or settings.default_query)
    found_student.if_present_or_else(
        lambda student: lines.append(f"Found: {student.name}"),
        lambda: lines.append("Student not found"),
    )
    return lines
