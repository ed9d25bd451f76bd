"""Shared fixtures for the advising tests."""

import pytest

from advising import load


SCENARIO_LINES = [
    "CS101, Intro to CS,",
    "CS201, Data Structures, CS101",
    "CS300, Algorithms, CS201,CS999",
    "cs101, Duplicate Intro,",
]

ABCU_LINES = [
    "MATH201,Discrete Mathematics",
    "CSCI300,Introduction to Algorithms,CSCI200,MATH201",
    "CSCI350,Operating Systems,CSCI300",
    "CSCI101,Introduction to Programming in C++,CSCI100",
    "CSCI100,Introduction to Computer Science",
    "CSCI301,Advanced Programming in C++,CSCI101",
    "CSCI400,Large Software Development,CSCI301,CSCI350",
    "CSCI200,Data Structures,CSCI101",
]


@pytest.fixture
def scenario_lines():
    return list(SCENARIO_LINES)


@pytest.fixture
def abcu_lines():
    return list(ABCU_LINES)


@pytest.fixture
def abcu_catalog(abcu_lines):
    catalog, diagnostics = load(abcu_lines)
    assert diagnostics == []
    return catalog


@pytest.fixture
def course_file(tmp_path, abcu_lines):
    """The ABCU course list written to disk."""
    path = tmp_path / "courses.csv"
    path.write_text("\n".join(abcu_lines) + "\n", encoding="utf-8")
    return path
