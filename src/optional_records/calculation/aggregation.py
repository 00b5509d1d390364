from functools import reduce
from operator import attrgetter
from typing import Callable, Iterable, List, Optional, TypeVar

from loguru import logger

from optional_records.config.settings import settings
from optional_records.models.option import Option, absent, present
from optional_records.models.student import Student

R = TypeVar("R")


def average(
    records: Iterable[R],
    predicate: Callable[[R], bool],
    value: Callable[[R], float] = attrgetter("age"),
    default: Optional[float] = None,
) -> float:
    """
    Arithmetic mean of ``value(record)`` over the records that pass ``predicate``.

    Args:
        records: The records to aggregate.
        predicate: Filter applied before averaging.
        value: Extracts the numeric attribute (age by default).
        default: Returned when no record passes the filter.
                 Falls back to ``settings.default_average``.

    Returns:
        The mean as a float, or the default for an empty filtered set.
    """
    values: List[float] = [value(record) for record in records if predicate(record)]
    if not values:
        fallback = settings.default_average if default is None else default
        logger.debug(f"No records passed the filter, using default {fallback}")
        return float(fallback)
    return sum(values) / len(values)


def extremum(records: Iterable[R], compare: Callable[[R, R], bool]) -> Option[R]:
    """
    Folds ``records`` pairwise, keeping the winner of each comparison.

    ``compare(candidate, current)`` returns True when ``candidate`` should
    replace the current winner, so with a strict comparison the first-seen
    record wins ties.

    Returns:
        Present(winner) for a non-empty collection, Absent otherwise.
    """
    items = list(records)
    if not items:
        return absent()
    winner = reduce(
        lambda current, candidate: candidate if compare(candidate, current) else current,
        items,
    )
    return present(winner)


def is_older(candidate: Student, current: Student) -> bool:
    return candidate.age > current.age


def average_age(
    students: Iterable[Student],
    minimum_age: Optional[int] = None,
    default: Optional[float] = None,
) -> float:
    """Mean age of students strictly older than ``minimum_age``."""
    threshold = settings.age_threshold if minimum_age is None else minimum_age
    return average(students, lambda s: s.age > threshold, default=default)


def oldest_student(students: Iterable[Student]) -> Option[Student]:
    return extremum(students, is_older)
