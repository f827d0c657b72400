"""Tests for line/block segmentation and the shared key helpers."""

import re

from resume_sections.core.segmenter import captured, keyed_entries, keyword_regex, slugify, to_blocks, to_lines


def test_to_lines_trims_and_drops_empty_lines():
    assert to_lines("  Jane Doe  \n\n   \njane@example.com\n") == ["Jane Doe", "jane@example.com"]


def test_to_lines_empty_text():
    assert to_lines("") == []
    assert to_lines("   \n \n") == []


def test_to_blocks_splits_on_blank_lines():
    assert to_blocks("A\nB\n\nC") == ["A\nB", "C"]


def test_to_blocks_treats_whitespace_only_lines_as_blank():
    assert to_blocks("A\n   \n\n  C") == ["A", "C"]


def test_to_blocks_keeps_all_content():
    text = "Job one\n- did things\n\n\n\nJob two\n- did more"
    blocks = to_blocks(text)
    assert len(blocks) == 2
    assert "did things" in blocks[0]
    assert "did more" in blocks[1]


def test_slugify():
    assert slugify("E-Commerce Platform") == "e_commerce_platform"
    assert slugify("Dr. Jane Smith") == "dr_jane_smith"
    assert slugify("!!!") == ""


def test_slugify_truncates_to_thirty_characters():
    slug = slugify("A Very Long Project Name That Keeps Going On And On")
    assert len(slug) <= 30
    assert not slug.endswith("_")


def test_keyed_entries_single_entry_is_current():
    assert keyed_entries(["only"], "job") == {"current": "only"}


def test_keyed_entries_ordinal_keys():
    assert keyed_entries(["a", "b", "c"], "education") == {
        "education_1": "a",
        "education_2": "b",
        "education_3": "c",
    }


def test_keyed_entries_slug_keys_with_fallback():
    keyed = keyed_entries(["a", "b"], "project", titles=["Weather App", "???"])
    assert list(keyed) == ["weather_app", "project_2"]


def test_keyed_entries_duplicate_slugs_stay_unique():
    keyed = keyed_entries(["a", "b", "c"], "reference", titles=["Jane Smith", "Jane Smith", "Jane  Smith"])
    assert list(keyed) == ["jane_smith", "jane_smith_2", "jane_smith_3"]
    assert list(keyed.values()) == ["a", "b", "c"]


def test_keyword_regex_whole_words_only():
    pattern = keyword_regex(["tech", "start date"])
    assert pattern.search("Tech: Python")
    assert pattern.search("Start  Date: June 2024")
    assert pattern.search("Technical debt") is None


def test_keyword_regex_anchored():
    pattern = keyword_regex(["name"], anchored=True)
    assert pattern.match("Name: Jane")
    assert pattern.match("My name") is None


def test_keyword_regex_no_keywords():
    assert keyword_regex([]) is None


def test_captured_prefers_first_group():
    assert captured(re.search(r"GPA:\s*(\d\.\d+)", "GPA: 3.9")) == "3.9"
    assert captured(re.search(r"\d{4}", "Class of 2023")) == "2023"
