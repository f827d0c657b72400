"""Tests for section routing and end-to-end section parsing."""

import pytest

from resume_sections.core.dispatcher import PARSERS, parse_section
from resume_sections.core.errors import ParserConfigError, UnknownSectionError
from resume_sections.core.parser_config import SkillsConfig
from resume_sections.core.schemas import DemographicsRecord, EducationRecord, SectionType


SAMPLES = {
    "demographics": "Patrick Conan\nRochester, New York | (845)-645-8158 | conap910@gmail.com",
    "education": "MIT\nB.S. Physics, 2019\n\nHarvard University\nPh.D. Physics, 2024",
    "employment": "Software Engineer | Google | Mountain View, CA | Jan 2020 - Present",
    "projects": "• Weather App - React Native mobile app\n• Discord Bot - Python bot (2023)",
    "skills": "Python (Expert), JavaScript (Advanced), React (Intermediate)",
    "references": "Robert Chen - CTO at TechCorp - robert@techcorp.com",
}


def test_every_section_has_a_parser():
    assert set(PARSERS) == set(SectionType)


@pytest.mark.parametrize("section, text", list(SAMPLES.items()))
def test_parsing_is_deterministic(section, text):
    assert parse_section(section, text) == parse_section(section, text)


def test_demographics_scenario():
    text = (
        "Patrick Conan\n"
        "Rochester, New York | (845)-645-8158 | conap910@gmail.com\n"
        "linkedin.com/in/patrick-conan — github.com/c0nap"
    )

    record = parse_section("demographics", text)

    assert isinstance(record, DemographicsRecord)
    assert record.name == "Patrick Conan"
    assert record.address == "Rochester, New York"
    assert record.phone == "(845)-645-8158"
    assert record.email == "conap910@gmail.com"
    assert record.linkedin == "linkedin.com/in/patrick-conan"
    assert record.github == "github.com/c0nap"


def test_education_scenario():
    result = parse_section(SectionType.EDUCATION, "B.S. Computer Science, MIT, Cambridge MA, Class of 2023, GPA 3.9")

    assert list(result) == ["current"]
    entry = result["current"]
    assert isinstance(entry, EducationRecord)
    assert "B.S." in entry.degree
    assert "MIT" in entry.institution
    assert entry.year == "2023"
    assert entry.gpa == "3.9"


def test_skills_scenario():
    result = parse_section("skills", "Python (Expert), JavaScript (Advanced), React (Intermediate)")

    assert sorted(result) == ["JavaScript", "Python", "React"]
    assert not any("Expert" in skill for skill in result)


def test_employment_scenario():
    text = (
        "Software Engineer | Google | Mountain View, CA | Jan 2020 - Present\n"
        "- Built internal search tooling\n"
        "\n"
        "Data Analyst | Acme Corp | Austin, TX | Jun 2018 - Dec 2019\n"
        "- Automated weekly reporting"
    )

    result = parse_section("employment", text)

    assert set(result) == {"job_1", "job_2"}
    assert (result["job_1"].title, result["job_1"].company, result["job_1"].dates) == (
        "Software Engineer", "Google", "Jan 2020 - Present",
    )
    assert (result["job_2"].title, result["job_2"].company, result["job_2"].dates) == (
        "Data Analyst", "Acme Corp", "Jun 2018 - Dec 2019",
    )


def test_unknown_section_scenario():
    with pytest.raises(UnknownSectionError, match="invalid_section"):
        parse_section("invalid_section", "anything")


def test_unknown_section_is_a_value_error():
    with pytest.raises(ValueError):
        parse_section("not_a_section", "x")


def test_custom_config_is_passed_through():
    result = parse_section("skills", "Python/Go/Rust", {"delimiters": ["/"]})
    assert result == ["Python", "Go", "Rust"]

    result = parse_section("skills", "Python/Go/Rust", SkillsConfig(delimiters=("/",)))
    assert result == ["Python", "Go", "Rust"]


def test_custom_config_does_not_leak_into_later_calls():
    parse_section("skills", "Python/Go", {"delimiters": ["/"]})

    assert parse_section("skills", "Python/Go") == ["Python/Go"]


def test_bad_config_raises():
    with pytest.raises(ParserConfigError):
        parse_section("skills", "Python", {"delimiter": [","]})


def test_none_text_is_treated_as_empty():
    assert parse_section("skills", None) == []
    assert parse_section("education", None) == {}


def test_multi_entry_keys_are_unique():
    text = "Portfolio\nv1\n\nPortfolio\nv2\n\nPortfolio\nv3"

    result = parse_section("projects", text)

    assert len(result) == 3
