from operator import attrgetter
from typing import Callable, Iterable, Optional, TypeVar

from loguru import logger

from optional_records.models.course import Course
from optional_records.models.option import Option, absent, present
from optional_records.models.student import Student
from optional_records.utils.misc_utils import keys_match

R = TypeVar("R")


def find_first(
    records: Iterable[R], query: str, key: Callable[[R], str]
) -> Option[R]:
    """
    Scans ``records`` in order and returns the first one whose key matches
    ``query``, ignoring case.

    Args:
        records: The collection to search. It is not modified.
        query: The key to look for.
        key: Extracts the lookup key from a record.

    Returns:
        Present(record) for the first match, Absent if nothing matches.
    """
    for record in records:
        if keys_match(key(record), query):
            logger.debug(f"Lookup for '{query}' matched {record!r}")
            return present(record)
    logger.debug(f"Lookup for '{query}' found no match")
    return absent()


def find_student(students: Iterable[Student], name: str) -> Option[Student]:
    return find_first(students, name, attrgetter("name"))


def find_course(courses: Iterable[Course], title: str) -> Option[Course]:
    return find_first(courses, title, attrgetter("title"))


def find_student_or_none(students: Iterable[Student], name: str) -> Optional[Student]:
    """Traditional lookup: returns None when no student matches.

    Callers that read attributes off the result without checking will fail
    with AttributeError on a miss. Prefer find_student().
    """
    for student in students:
        if keys_match(student.name, name):
            return student
    return None
