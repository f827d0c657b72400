"""
Projects parsing.

A block is normally one project: the first line is the title (with any
timeframe lifted out of it) and a "Tech Stack:"-style line supplies the
technologies. A block made only of bullets is a compact list with one project
per bullet ("• Weather App - React Native mobile app").
"""

import logging
import re
from typing import Dict, List, Optional, Tuple

from resume_sections.core.parser_config import ProjectsConfig
from resume_sections.core.schemas import ProjectRecord
from resume_sections.core.segmenter import keyed_entries, keyword_regex, to_blocks, to_lines

logger = logging.getLogger(__name__)

TITLE_TRIM = " \t,;:|-–—"
EMPTY_BRACKETS_RE = re.compile(r"\(\s*\)|\[\s*\]")


def _strip_bullet(line: str, config: ProjectsConfig) -> str:
    bullet = config.patterns.get("bullet")
    return bullet.sub("", line, count=1).strip() if bullet is not None else line


def _is_bullet(line: str, config: ProjectsConfig) -> bool:
    bullet = config.patterns.get("bullet")
    return bullet is not None and bullet.match(line) is not None


def split_timeframe(title: str, config: ProjectsConfig) -> Tuple[str, str]:
    """
    Lift a date range, short month+year or bare year out of a title line.

    Examples:
      "Weather App (2023)" -> ("Weather App", "2023")
      "Portfolio Site | Jan 2022 - Mar 2022" -> ("Portfolio Site", "Jan 2022 - Mar 2022")
    """
    for name in ("date_range", "timeframe"):
        pattern = config.patterns.get(name)
        m = pattern.search(title) if pattern is not None else None
        if m:
            rest = EMPTY_BRACKETS_RE.sub("", title[:m.start()] + title[m.end():])
            return " ".join(rest.split()).strip(TITLE_TRIM), m.group(0).strip()
    return title.strip(TITLE_TRIM), ""


def _technologies(line: str, config: ProjectsConfig) -> Optional[str]:
    """The technologies named on a tech-cue line, or None for any other line."""
    cue_re = keyword_regex(config.keywords.get("technologies", ()), anchored=True)
    m = cue_re.match(line) if cue_re is not None else None
    if not m:
        return None
    if ":" in line:
        return line.split(":", 1)[1].strip(TITLE_TRIM)
    return line[m.end():].strip(TITLE_TRIM)


def parse_project_block(lines: List[str], config: ProjectsConfig) -> ProjectRecord:
    title, timeframe = split_timeframe(_strip_bullet(lines[0], config), config)

    technologies = ""
    description: List[str] = []
    for line in lines[1:]:
        found = _technologies(_strip_bullet(line, config), config) if not technologies else None
        if found is not None:
            technologies = found
            continue
        description.append(line)

    return ProjectRecord(
        title=title,
        description="\n".join(description),
        timeframe=timeframe,
        technologies=technologies,
    )


def parse_project_bullet(line: str, config: ProjectsConfig) -> ProjectRecord:
    """
    Examples:
      "• Discord Bot - Python bot with 50+ commands (2023)"
        -> title "Discord Bot", description "Python bot with 50+ commands", timeframe "2023"
    """
    text, timeframe = split_timeframe(_strip_bullet(line, config), config)
    splitter = config.patterns.get("title_split")
    parts = splitter.split(text, maxsplit=1) if splitter is not None else [text]
    title = parts[0].strip(TITLE_TRIM)
    description = parts[1].strip(TITLE_TRIM) if len(parts) > 1 else ""
    return ProjectRecord(title=title, description=description, timeframe=timeframe)


def parse_projects(text: str, config: Optional[ProjectsConfig] = None) -> Dict[str, ProjectRecord]:
    config = config or ProjectsConfig()
    entries: List[ProjectRecord] = []
    for block in to_blocks(text):
        lines = to_lines(block)
        if all(_is_bullet(line, config) for line in lines):
            logger.debug(f"Bullet list block: {len(lines)} project(s)")
            entries.extend(parse_project_bullet(line, config) for line in lines)
        else:
            entries.append(parse_project_block(lines, config))

    return keyed_entries(entries, "project", titles=[entry.title for entry in entries])
