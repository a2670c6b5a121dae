"""Tests for the line-level résumé recognisers."""

from __future__ import annotations

import pytest  # type: ignore

from tailorflow.resume.fields import (
    DateRange,
    categorize_skill,
    find_date_range,
    find_degree,
    find_email,
    find_gpa,
    find_linkedin,
    find_phone,
    find_year,
    is_bullet,
    strip_bullet,
)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("06/2019 - 08/2021", DateRange("06/2019", "08/2021")),
        ("2015 – 2018", DateRange("2015", "2018")),
        ("06/19 — current", DateRange("06/19", "")),
        ("06/2019 - Present", DateRange("06/2019", "")),
        ("Since 2019 - present", DateRange("2019", "")),
    ],
)
def test_find_date_range(line: str, expected: DateRange) -> None:
    assert find_date_range(line) == expected


def test_date_range_pattern_order() -> None:
    """A full MM/YYYY range wins over a year-only pair earlier in the line."""
    found = find_date_range("2001 - 2003 then 03/2005 - 04/2006")
    assert found == DateRange("03/2005", "04/2006")


def test_date_range_span_covers_match() -> None:
    line = "Engineer 2016 - 2019"
    found = find_date_range(line)
    assert found is not None
    assert line[found.span[0]:found.span[1]] == "2016 - 2019"


def test_no_date_range() -> None:
    assert find_date_range("no dates here") is None
    assert find_date_range(None) is None


def test_contact_recognisers() -> None:
    assert find_email("Contact: jane@example.org today") == "jane@example.org"
    assert find_email("no address") == ""
    assert find_phone("+1 555.123.4567") == "+1 555.123.4567"
    assert find_phone("call 12345") == ""
    assert find_linkedin("See LinkedIn.com/in/Jane-Doe") == "LinkedIn.com/in/Jane-Doe"


def test_year_and_gpa() -> None:
    assert find_year("Graduated 2021") == "2021"
    assert find_year("Class of 1850") == ""
    assert find_gpa("GPA: 3.85") == "3.85"
    assert find_gpa("gpa 4.0") == "4.0"
    assert find_gpa("Great grades") == ""


def test_find_degree() -> None:
    assert find_degree("Master of Science") == "master"
    assert find_degree("M.S. in Physics") == "m.s."
    assert find_degree("High school diploma") == ""


@pytest.mark.parametrize(
    "skill, bucket",
    [
        ("Python", "technical"),
        ("JavaScript and Excel", "technical"),
        ("Excel", "tools"),
        ("Figma", "tools"),
        ("French", "languages"),
        ("Team building", "soft"),
    ],
)
def test_categorize_skill(skill: str, bucket: str) -> None:
    assert categorize_skill(skill) == bucket


def test_bullets() -> None:
    assert is_bullet("• Did things")
    assert is_bullet("3. Shipped")
    assert not is_bullet("Plain sentence")
    assert strip_bullet("• Did things") == "Did things"
    assert strip_bullet("* item") == "item"
    assert strip_bullet("3. Shipped") == "Shipped"
