from typing import Callable, TypeVar, Union

from optional_records.models.option import Option, absent, present

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

# The second operand of combine() may be passed as-is or deferred behind a
# zero-argument supplier.
OptionOrSupplier = Union[Option[U], Callable[[], Option[U]]]


def transform(option: Option[T], func: Callable[[T], U]) -> Option[U]:
    """Maps ``func`` over a present value. ``func`` is never called on Absent."""
    return option.map(func)


def combine(
    first: Option[T],
    second: OptionOrSupplier,
    combiner: Callable[[T, U], V],
) -> Option[V]:
    """
    Combines two optional values with ``combiner``.

    The result is present only when both operands are present. If ``first`` is
    absent, ``second`` (when it is a supplier) and ``combiner`` are never
    evaluated. ``combiner`` runs at most once.

    Args:
        first: The first optional value.
        second: The second optional value, or a supplier returning it.
        combiner: Builds the result from both values. Must not return None.

    Returns:
        Present(combiner(a, b)) or Absent.
    """
    if first.is_absent():
        return absent()

    other = second() if callable(second) else second
    if not isinstance(other, Option):
        raise TypeError(
            f"combine() second operand must be an Option, got {type(other).__name__}"
        )
    if other.is_absent():
        return absent()

    return present(combiner(first.get(), other.get()))
