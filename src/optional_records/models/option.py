"""
Optional result container.

An ``Option`` is either ``Present`` (holding exactly one value, never ``None``)
or ``Absent``. Lookups return one of these instead of ``None`` so callers have
to say what happens in the absent case before they can reach the value.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterator, List, NoReturn, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class OptionError(Exception):
    """Base exception for misuse of an Option."""

    pass


class NoneValueError(OptionError, ValueError):
    """Raised when a present Option is built from None."""

    pass


class AbsentValueError(OptionError, LookupError):
    """Raised when the value of an absent Option is requested."""

    pass


class Option(Generic[T], ABC):
    """Abstract base class for the two Option states."""

    __slots__ = ()

    @abstractmethod
    def is_present(self) -> bool:
        """True if this Option holds a value."""

    def is_absent(self) -> bool:
        return not self.is_present()

    @abstractmethod
    def get(self) -> T:
        """Return the value, or raise AbsentValueError."""

    @abstractmethod
    def or_else(self, default: T) -> T:
        """Return the value, or ``default`` when absent."""

    @abstractmethod
    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """Return the value, or the result of ``supplier()`` when absent."""

    @abstractmethod
    def or_else_raise(self, exc_factory: Callable[[], Exception]) -> T:
        """Return the value, or raise the exception built by ``exc_factory``."""

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> "Option[U]":
        """Apply ``func`` to the value. A None result becomes Absent."""

    @abstractmethod
    def flat_map(self, func: Callable[[T], "Option[U]"]) -> "Option[U]":
        """Apply an Option-returning ``func`` to the value."""

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        """Keep the value only if ``predicate`` holds for it."""

    @abstractmethod
    def if_present(self, consumer: Callable[[T], Any]) -> None:
        """Call ``consumer`` with the value when present."""

    @abstractmethod
    def if_present_or_else(
        self, consumer: Callable[[T], Any], empty_action: Callable[[], Any]
    ) -> None:
        """Call ``consumer`` with the value, or ``empty_action`` when absent."""

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        pass

    def to_list(self) -> List[T]:
        """Empty list when absent, single-item list when present."""
        return list(self)


class Present(Option[T]):
    """Option state holding a value."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        if value is None:
            raise NoneValueError("Present cannot hold None - use absent() instead")
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_present(self) -> bool:
        return True

    def get(self) -> T:
        return self._value

    def or_else(self, default: T) -> T:
        return self._value

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        return self._value

    def or_else_raise(self, exc_factory: Callable[[], Exception]) -> T:
        return self._value

    def map(self, func: Callable[[T], U]) -> Option[U]:
        result = func(self._value)
        if isinstance(result, Option):
            raise TypeError(
                "map() function returned an Option; use flat_map() instead"
            )
        return of_nullable(result)

    def flat_map(self, func: Callable[[T], Option[U]]) -> Option[U]:
        result = func(self._value)
        if not isinstance(result, Option):
            raise TypeError(
                f"flat_map() function must return an Option, got {type(result).__name__}"
            )
        return result

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self if predicate(self._value) else absent()

    def if_present(self, consumer: Callable[[T], Any]) -> None:
        consumer(self._value)

    def if_present_or_else(
        self, consumer: Callable[[T], Any], empty_action: Callable[[], Any]
    ) -> None:
        consumer(self._value)

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Present):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Present, self._value))

    def __repr__(self) -> str:
        return f"Present({self._value!r})"


class Absent(Option[T]):
    """Option state with no value."""

    __slots__ = ()

    def is_present(self) -> bool:
        return False

    def get(self) -> NoReturn:
        raise AbsentValueError("No value present")

    def or_else(self, default: T) -> T:
        return default

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        return supplier()

    def or_else_raise(self, exc_factory: Callable[[], Exception]) -> NoReturn:
        raise exc_factory()

    def map(self, func: Callable[[T], U]) -> Option[U]:
        return _ABSENT

    def flat_map(self, func: Callable[[T], Option[U]]) -> Option[U]:
        return _ABSENT

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self

    def if_present(self, consumer: Callable[[T], Any]) -> None:
        return None

    def if_present_or_else(
        self, consumer: Callable[[T], Any], empty_action: Callable[[], Any]
    ) -> None:
        empty_action()

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return isinstance(other, Absent)

    def __hash__(self) -> int:
        return hash(Absent)

    def __repr__(self) -> str:
        return "Absent()"


_ABSENT: Absent[Any] = Absent()


def present(value: T) -> Option[T]:
    """Wrap a value that must not be None."""
    return Present(value)


def absent() -> Option[Any]:
    return _ABSENT


def of_nullable(value: Any) -> Option[Any]:
    """Present for a value, Absent for None."""
    return _ABSENT if value is None else Present(value)
