"""
References parsing: one reference per blank-line-separated block.

Expected layout, with any line optional:

    Dr. Jane Smith
    Professor of Computer Science, MIT
    Massachusetts Institute of Technology
    jane.smith@mit.edu
    (617) 555-1234

A one-line reference ("Robert Chen - CTO at TechCorp - robert@techcorp.com")
is re-split on its separators first.
"""

import logging
from typing import Dict, List, Optional

from resume_sections.core.parser_config import ReferencesConfig
from resume_sections.core.schemas import ReferenceRecord
from resume_sections.core.segmenter import keyed_entries, to_blocks, to_lines

logger = logging.getLogger(__name__)

FIELD_TRIM = " \t,;:|-–—"


def _first_match(block: str, name: str, config: ReferencesConfig) -> str:
    pattern = config.patterns.get(name)
    m = pattern.search(block) if pattern is not None else None
    return m.group(0).strip() if m else ""


def _without(line: str, *values: str) -> str:
    for value in values:
        if value:
            line = line.replace(value, "")
    return line.strip(FIELD_TRIM)


def _resplit_single_line(lines: List[str], config: ReferencesConfig) -> List[str]:
    separators = config.patterns.get("separators")
    if len(lines) != 1 or separators is None:
        return lines
    parts = [p.strip() for p in separators.split(lines[0]) if p.strip(FIELD_TRIM)]
    if len(parts) > 1:
        logger.debug(f"Re-split one-line reference into {len(parts)} line(s)")
        return parts
    return lines


def parse_reference_block(block: str, config: ReferencesConfig) -> ReferenceRecord:
    lines = _resplit_single_line(to_lines(block), config)
    email = _first_match(block, "email", config)
    phone = _first_match(block, "phone", config)

    name = _without(lines[0], email, phone) if lines else ""
    title = company = ""

    if len(lines) > 1:
        second = _without(lines[1], email, phone)
        splitter = config.patterns.get("title_company")
        parts = splitter.split(second, maxsplit=1) if splitter is not None else [second]
        if len(parts) >= 2:
            title, company = parts[0].strip(FIELD_TRIM), parts[1].strip(FIELD_TRIM)
        else:
            title = second

    if len(lines) > 2 and not company:
        company = _without(lines[2], email, phone)

    return ReferenceRecord(name=name, title=title, company=company, email=email, phone=phone)


def parse_references(text: str, config: Optional[ReferencesConfig] = None) -> Dict[str, ReferenceRecord]:
    config = config or ReferencesConfig()
    entries = [parse_reference_block(block, config) for block in to_blocks(text)]
    return keyed_entries(entries, "reference", titles=[entry.name for entry in entries])
