"""
Employment parsing: one job per blank-line-separated block.

The header line carries title, company, location and dates in some order,
separated by pipes, long dashes, a spaced hyphen or wide gaps. Everything below
the header is the description.
"""

import logging
from typing import Dict, List, Optional, Tuple

from resume_sections.core.parser_config import EmploymentConfig
from resume_sections.core.schemas import EmploymentRecord
from resume_sections.core.segmenter import keyed_entries, to_blocks, to_lines

logger = logging.getLogger(__name__)

PART_TRIM = " \t,;:"


def _take_dates(lines: List[str], config: EmploymentConfig) -> Tuple[str, List[str]]:
    """
    Pull the date range off the header line.

    Returns the dates and the lines with the dates removed. A block whose
    header has no dates may still carry them on a line of their own; that
    line is consumed so it does not end up in the description.
    """
    pattern = config.patterns.get("dates")
    if pattern is None or not lines:
        return "", lines

    header = lines[0]
    m = pattern.search(header)
    if m:
        # Leave a wide gap so the split below still sees a boundary
        rest = f"{header[:m.start()]}  {header[m.end():]}"
        if not _split_header(rest, config):
            # Dates-only header: the next line is the real header
            return m.group(0).strip(), lines[1:]
        return m.group(0).strip(), [rest] + lines[1:]

    for idx, line in enumerate(lines[1:], start=1):
        m = pattern.fullmatch(line)
        if m:
            logger.debug(f"Dates found on their own line: '{line}'")
            return m.group(0).strip(), lines[:idx] + lines[idx + 1:]
    return "", lines


def _split_header(header: str, config: EmploymentConfig) -> List[str]:
    splitter = config.patterns.get("split")
    parts = splitter.split(header) if splitter is not None else [header]
    return [p.strip(PART_TRIM) for p in parts if p.strip(PART_TRIM)]


def _locate(parts: List[str], config: EmploymentConfig) -> Tuple[str, str]:
    """
    Find (company, location) among the header parts after the title.

    Examples:
      ['Engineer', 'Google', 'Mountain View, CA'] -> ('Google', 'Mountain View, CA')
      ['Engineer', 'Acme Corp, Austin, TX'] -> ('Acme Corp', 'Austin, TX')
      ['Engineer', 'Stripe (Remote)'] -> ('Stripe', 'Remote')
    """
    location_re = config.patterns.get("location")
    if location_re is not None:
        for idx in range(1, len(parts)):
            m = location_re.search(parts[idx])
            if not m:
                continue
            before = parts[idx][:m.start()].strip(PART_TRIM)
            company = before or (parts[idx - 1] if idx >= 2 else "")
            return company, m.group(0).strip()

    remote_re = config.patterns.get("remote")
    if remote_re is not None:
        for idx in range(1, len(parts)):
            m = remote_re.search(parts[idx])
            if not m:
                continue
            location = m.group(1) if m.re.groups else m.group(0)
            company = remote_re.sub("", parts[idx]).strip(PART_TRIM)
            if not company and idx >= 2:
                company = parts[idx - 1]
            return company, location.strip("() ")

    return (parts[1] if len(parts) > 1 else ""), ""


def parse_employment_block(block: str, config: EmploymentConfig) -> EmploymentRecord:
    lines = to_lines(block)
    dates, lines = _take_dates(lines, config)
    if not lines:
        return EmploymentRecord(dates=dates)

    parts = _split_header(lines[0], config)
    company, location = _locate(parts, config)
    record = EmploymentRecord(
        title=parts[0] if parts else "",
        company=company,
        location=location,
        dates=dates,
        description="\n".join(lines[1:]),
    )
    logger.debug(f"Employment entry: title='{record.title}', company='{record.company}', dates='{record.dates}'")
    return record


def parse_employment(text: str, config: Optional[EmploymentConfig] = None) -> Dict[str, EmploymentRecord]:
    config = config or EmploymentConfig()
    entries = [parse_employment_block(block, config) for block in to_blocks(text)]
    return keyed_entries(entries, "job")
