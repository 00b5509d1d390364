import pytest

from optional_records.demos import (
    combining_optionals,
    optional_finder,
    optional_in_streams,
    optional_mapping,
    traditional_finder,
)
from optional_records.demos.registry import DEMOS, find_demo, run_demo


def test_traditional_finder_crashes_on_miss():
    with pytest.raises(AttributeError):
        traditional_finder.run("Suresh")


def test_traditional_finder_hit():
    assert traditional_finder.run("alice") == ["Alice"]


def test_optional_finder_reports_not_found():
    assert optional_finder.run("Suresh") == ["Student not found"]
    assert optional_finder.run("bob") == ["Found: Bob"]


def test_optional_mapping():
    assert optional_mapping.run("Suresh") == []
    assert optional_mapping.run("alice") == ["Name is ALICE"]


def test_combining_optionals():
    assert combining_optionals.run() == ["Average grade : 85.5"]
    assert combining_optionals.run(course_title="Rust") == []


def test_optional_in_streams():
    assert optional_in_streams.run() == [
        "Average age of students over 20 : 46.5",
        "Student name is : Alice",
    ]


def test_registry_lookup():
    assert set(DEMOS) == {"traditional", "finder", "mapping", "combining", "streams"}
    assert find_demo("FINDER").get().name == "finder"
    assert find_demo("nope").is_absent()


def test_run_demo_forwards_query_only_when_accepted():
    assert run_demo(DEMOS["finder"], "charlie") == ["Found: Charlie"]
    assert run_demo(DEMOS["combining"], "ignored") == ["Average grade : 85.5"]
    assert run_demo(DEMOS["finder"]) == ["Student not found"]
