from typing import List, Optional

from loguru import logger

from optional_records.config.settings import settings
from optional_records.lookup.finder import find_student_or_none
from optional_records.models.student import Student


def run(query: Optional[str] = None) -> List[str]:
    """Looks a student up with the None-returning finder and reads its name.

    A miss raises AttributeError, which is the failure this demo exists to show.
    """
    students = [Student("Alice", 20), Student("Bob", 21), Student("Charlie", 22)]
    name = query or settings.default_query

    found = find_student_or_none(students, name)
    logger.debug(f"Traditional lookup for '{name}' returned {found!r}")
    return [found.name]
