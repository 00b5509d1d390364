import pytest

from optional_records.calculation.combinators import combine, transform
from optional_records.lookup.finder import find_student
from optional_records.models.option import absent, present
from optional_records.models.student import Student


class CallCounter:
    def __init__(self, result=None):
        self.calls = 0
        self.result = result

    def __call__(self, *args):
        self.calls += 1
        return self.result


def test_transform_upper_cases_found_name():
    students = [Student("Alice", 20)]
    assert transform(find_student(students, "Alice"), lambda s: s.name.upper()) == present(
        "ALICE"
    )


def test_transform_absent_never_calls_function():
    func = CallCounter("unused")
    assert transform(absent(), func) == absent()
    assert func.calls == 0


def test_combine_both_present():
    combiner = CallCounter(7)
    assert combine(present(3), present(4), combiner) == present(7)
    assert combiner.calls == 1


def test_combine_uses_values():
    assert combine(present(3), present(4), lambda a, b: a + b) == present(7)


def test_combine_first_absent_short_circuits():
    combiner = CallCounter(1)
    supplier = CallCounter(present(4))
    assert combine(absent(), supplier, combiner) == absent()
    assert supplier.calls == 0
    assert combiner.calls == 0


def test_combine_second_absent():
    combiner = CallCounter(1)
    assert combine(present(3), absent(), combiner) == absent()
    assert combine(present(3), lambda: absent(), combiner) == absent()
    assert combiner.calls == 0


def test_combine_evaluates_supplier_once_when_first_present():
    supplier = CallCounter(present(4))
    assert combine(present(3), supplier, lambda a, b: a * b) == present(12)
    assert supplier.calls == 1


def test_combine_rejects_non_option_operand():
    with pytest.raises(TypeError):
        combine(present(3), lambda: 4, lambda a, b: a + b)
