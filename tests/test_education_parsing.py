"""Tests for education entry extraction."""

from resume_sections.core.education_parser import extract_gpa, extract_honors, extract_year, parse_education
from resume_sections.core.parser_config import EducationConfig


def test_single_line_entry():
    result = parse_education("B.S. Computer Science, MIT, Cambridge MA, Class of 2023, GPA 3.9")

    assert list(result) == ["current"]
    entry = result["current"]
    assert entry.degree.startswith("B.S.")
    assert "MIT" in entry.institution
    assert "Class of" not in entry.institution
    assert entry.year == "2023"
    assert entry.gpa == "3.9"


def test_institution_first_multiline_entry():
    text = (
        "Stanford University | 2016 - 2020\n"
        "Bachelor of Science in Computer Science\n"
        "GPA: 3.95/4.0\n"
        "Magna Cum Laude, Dean's List\n"
        "Relevant Coursework: Algorithms, Operating Systems, Databases"
    )

    entry = parse_education(text)["current"]

    assert entry.institution == "Stanford University"
    assert entry.degree == "Bachelor of Science in Computer Science"
    assert entry.year == "2016 - 2020"
    assert entry.gpa == "3.95/4.0"
    assert entry.honors == "Magna Cum Laude"
    assert entry.coursework == "Algorithms, Operating Systems, Databases"


def test_degree_first_takes_institution_from_second_line():
    text = "Master of Science in Data Science\nUniversity of Washington, Seattle, WA\n2021 – 2023"

    entry = parse_education(text)["current"]

    assert entry.degree == "Master of Science in Data Science"
    assert entry.institution == "University of Washington, Seattle, WA"
    assert entry.year == "2021 – 2023"


def test_concentration_and_minor():
    entry = parse_education("Boston University\nB.A. Economics\nMinor in Mathematics")["current"]
    assert entry.concentration == "Mathematics"

    entry = parse_education("Boston University\nB.A. Economics\nConcentration: Econometrics")["current"]
    assert entry.concentration == "Econometrics"


def test_multiple_blocks_get_ordinal_keys():
    text = "MIT\nB.S. Physics, 2019\n\nHarvard University\nPh.D. Physics, 2024"

    result = parse_education(text)

    assert list(result) == ["education_1", "education_2"]
    assert result["education_1"].institution == "MIT"
    assert result["education_2"].institution == "Harvard University"
    assert result["education_2"].degree.startswith("Ph.D.")
    assert result["education_2"].year == "2024"


def test_state_code_is_not_a_degree():
    entry = parse_education("Tufts University, Medford, MA\nB.S. Biology")["current"]

    assert entry.degree == "B.S. Biology"
    assert entry.institution == "Tufts University, Medford, MA"


def test_gpa_variants():
    config = EducationConfig()
    assert extract_gpa("GPA – 3.97", config) == "3.97"
    assert extract_gpa("Cumulative GPA 3.8", config) == "3.8"
    assert extract_gpa("3.45/4.00 overall", config) == "3.45/4.00"
    assert extract_gpa("Graduated 2020", config) == ""


def test_year_range_wins_over_single_year():
    config = EducationConfig()
    assert extract_year("Aug 2019, 2018 - Present", config) == "2018 - Present"
    assert extract_year("Expected May 2026", config) == "2026"


def test_honors_label_is_dropped():
    assert extract_honors("Honors: Dean's List (4 semesters)", EducationConfig()) == "Dean's List"


def test_empty_text():
    assert parse_education("") == {}
    assert parse_education("\n\n   \n") == {}


def test_custom_honors_keywords():
    config = EducationConfig.model_validate({"keywords": {"honors": ["with distinction"]}})

    entry = parse_education("University of Leeds\nBSc Mathematics, with distinction", config)["current"]

    assert entry.honors == "with distinction"


def test_state_code_before_capitalized_word_is_not_a_degree():
    entry = parse_education("Harvard University, Cambridge MA USA\n2020")["current"]

    assert entry.degree == ""
    assert entry.institution == "Harvard University, Cambridge MA USA"
    assert entry.year == "2020"


def test_undotted_degree_before_field_of_study():
    entry = parse_education("Rice University\nBS Computer Science")["current"]

    assert entry.degree == "BS Computer Science"
    assert entry.institution == "Rice University"
