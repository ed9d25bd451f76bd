"""Tests for list_sorted and lookup."""

from advising import (
    Catalog,
    CourseFound,
    CourseNotFound,
    CourseRecord,
    list_sorted,
    load,
    lookup,
)


def test_list_sorted_orders_by_key(abcu_catalog):
    courses = list_sorted(abcu_catalog)
    keys = [key for key, _ in courses]
    assert keys == sorted(keys)
    assert len(courses) == len(abcu_catalog)
    assert courses[0] == ("CSCI100", "Introduction to Computer Science")
    assert courses[-1] == ("MATH201", "Discrete Mathematics")


def test_list_sorted_empty_catalog():
    assert list_sorted(Catalog()) == []


def test_scenario_listing(scenario_lines):
    catalog, _ = load(scenario_lines)
    assert list_sorted(catalog) == [("CS101", "Intro to CS"), ("CS201", "Data Structures")]


def test_lookup_normalizes_search_key(scenario_lines):
    catalog, _ = load(scenario_lines)
    result = lookup(catalog, "  cs201 ")
    assert isinstance(result, CourseFound)
    assert result.found
    assert (result.key, result.title) == ("CS201", "Data Structures")
    assert [(p.key, p.title) for p in result.prerequisites] == [("CS101", "Intro to CS")]


def test_lookup_prerequisites_in_declared_order(abcu_catalog):
    result = lookup(abcu_catalog, "CSCI400")
    assert [p.key for p in result.prerequisites] == ["CSCI301", "CSCI350"]
    assert all(p.resolved for p in result.prerequisites)


def test_lookup_course_without_prerequisites(abcu_catalog):
    result = lookup(abcu_catalog, "csci100")
    assert result.prerequisites == []


def test_lookup_miss_carries_normalized_key(abcu_catalog):
    result = lookup(abcu_catalog, " csci999")
    assert isinstance(result, CourseNotFound)
    assert not result.found
    assert result.key == "CSCI999"


def test_lookup_unresolvable_prerequisite_is_marked():
    catalog = Catalog()
    catalog.add(CourseRecord("CS300", "Algorithms", ["CS201"]))
    result = lookup(catalog, "CS300")
    assert len(result.prerequisites) == 1
    assert result.prerequisites[0].key == "CS201"
    assert result.prerequisites[0].title is None
    assert not result.prerequisites[0].resolved


def test_catalog_add_does_not_overwrite():
    catalog = Catalog()
    assert catalog.add(CourseRecord("CS101", "First"))
    assert not catalog.add(CourseRecord("CS101", "Second"))
    assert catalog.get("CS101").title == "First"
    assert len(catalog) == 1
