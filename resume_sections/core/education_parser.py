"""
Education parsing module for extracting degree entries from pasted resume text.

Each blank-line-separated block is one entry. Fields are pulled from the block
with deterministic pattern rules; the institution is whatever is left of its
line once the degree, year and GPA text has been taken out.
"""

import logging
import re
from re import Pattern
from typing import Dict, List, Optional

from resume_sections.core.parser_config import EducationConfig
from resume_sections.core.schemas import EducationRecord
from resume_sections.core.segmenter import captured, keyed_entries, keyword_regex, to_blocks, to_lines

logger = logging.getLogger(__name__)

FIELD_TRIM = " \t,;:|-–—•"


def _delimiter_regex(delimiters) -> Optional[Pattern]:
    if not delimiters:
        return None
    return re.compile("|".join(re.escape(d) for d in sorted(delimiters, key=len, reverse=True)))


# ===== SIMPLE FIELDS =====

def extract_year(block: str, config: EducationConfig) -> str:
    """
    Year range first, else the first single year.

    Examples:
      "2016 - 2020" -> "2016 - 2020"
      "Class of 2023" -> "2023"
    """
    for name in ("year_range", "year"):
        pattern = config.patterns.get(name)
        m = pattern.search(block) if pattern is not None else None
        if m:
            return m.group(0).strip()
    return ""


def extract_gpa(block: str, config: EducationConfig) -> str:
    """
    Labeled GPA first, else a bare X.XX[/Y.YY] number.

    Examples:
      "GPA: 3.95/4.0" -> "3.95/4.0"
      "GPA – 3.97" -> "3.97"
      "Cumulative GPA 3.8" -> "3.8"
    """
    for name in ("gpa_labeled", "gpa_bare"):
        pattern = config.patterns.get(name)
        m = pattern.search(block) if pattern is not None else None
        if m:
            return captured(m)
    return ""


def extract_degree(lines: List[str], config: EducationConfig) -> str:
    pattern = config.patterns.get("degree")
    if pattern is None:
        return ""
    for line in lines:
        m = pattern.search(line)
        if m:
            return m.group(0).strip(FIELD_TRIM)
    return ""


def extract_honors(block: str, config: EducationConfig) -> str:
    """
    Leftmost honors keyword plus a short window, cut at the first delimiter.

    Examples:
      "Magna Cum Laude, Dean's List" -> "Magna Cum Laude"
      "Honors: Dean's List (4 semesters)" -> "Dean's List"
    """
    keyword_re = keyword_regex(config.keywords.get("honors", ()))
    m = keyword_re.search(block) if keyword_re else None
    if not m:
        return ""

    window = block[m.start():m.start() + config.honors_window]
    stop = config.patterns.get("honors_stop")
    if stop is not None:
        window = stop.split(window, maxsplit=1)[0]
    # "Honors: Dean's List" keeps only the value after the label
    _, sep, rest = window.partition(":")
    if sep and rest.strip():
        window = rest
    return window.strip(FIELD_TRIM)


def extract_concentration(block: str, config: EducationConfig) -> str:
    """
    Examples:
      "Concentration: Machine Learning" -> "Machine Learning"
      "Minor in Mathematics" -> "Mathematics"
    """
    keywords = config.keywords.get("concentration", ())
    if not keywords:
        return ""
    alternatives = "|".join(re.escape(k) for k in sorted(keywords, key=len, reverse=True))
    pattern = re.compile(
        rf"\b(?:{alternatives})\b(?:[ \t]+(?:in|on))?[ \t]*[:\-–—]?[ \t]*([^|;•\n]+)",
        re.IGNORECASE,
    )
    m = pattern.search(block)
    return m.group(1).strip(FIELD_TRIM) if m else ""


def extract_coursework(lines: List[str], config: EducationConfig) -> str:
    keyword_re = keyword_regex(config.keywords.get("coursework", ()))
    if keyword_re is None:
        return ""
    for line in lines:
        m = keyword_re.search(line)
        if not m:
            continue
        if ":" in line:
            return line.split(":", 1)[1].strip(FIELD_TRIM)
        return line[m.end():].strip(FIELD_TRIM)
    return ""


# ===== INSTITUTION =====

def extract_institution(lines: List[str], degree: str, config: EducationConfig) -> str:
    """
    Institution from the first line, or the second line when the first line
    opens with the degree. Degree, year and GPA text is removed, only the first
    delimiter segment is kept, and filler fragments are dropped.

    Examples:
      "B.S. Computer Science, MIT, Cambridge MA, Class of 2023, GPA 3.9" -> "MIT, Cambridge MA"
      "Stanford University | 2016 - 2020" -> "Stanford University"
    """
    if not lines:
        return ""

    line = lines[0]
    degree_re = config.patterns.get("degree")
    if len(lines) > 1 and degree_re is not None and degree_re.match(line):
        line = lines[1]
        logger.debug(f"Institution taken from second line: '{line}'")

    for name in ("gpa_labeled", "gpa_bare", "year_range", "year"):
        pattern = config.patterns.get(name)
        if pattern is not None:
            line = pattern.sub(" ", line)
    if degree and degree in line:
        line = line.replace(degree, " ", 1)

    splitter = _delimiter_regex(config.delimiters)
    if splitter is not None:
        segments = [s for s in splitter.split(line) if s.strip(FIELD_TRIM)]
        line = segments[0] if segments else ""

    filler = config.patterns.get("filler")
    fragments = []
    for fragment in line.split(","):
        fragment = " ".join(fragment.split()).strip(FIELD_TRIM)
        if not fragment:
            continue
        if filler is not None and filler.match(fragment):
            logger.debug(f"Dropped filler fragment '{fragment}'")
            continue
        fragments.append(fragment)
    return ", ".join(fragments)


def parse_education_block(block: str, config: EducationConfig) -> EducationRecord:
    lines = to_lines(block)
    degree = extract_degree(lines, config)
    record = EducationRecord(
        institution=extract_institution(lines, degree, config),
        degree=degree,
        year=extract_year(block, config),
        gpa=extract_gpa(block, config),
        honors=extract_honors(block, config),
        concentration=extract_concentration(block, config),
        coursework=extract_coursework(lines, config),
    )
    logger.debug(f"Education entry: institution='{record.institution}', degree='{record.degree}'")
    return record


def parse_education(text: str, config: Optional[EducationConfig] = None) -> Dict[str, EducationRecord]:
    config = config or EducationConfig()
    entries = [parse_education_block(block, config) for block in to_blocks(text)]
    return keyed_entries(entries, "education")
