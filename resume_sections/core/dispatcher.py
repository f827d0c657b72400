"""
Entry point that routes pasted text to the parser for its section.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Union

from resume_sections.core.demographics_parser import parse_demographics
from resume_sections.core.education_parser import parse_education
from resume_sections.core.employment_parser import parse_employment
from resume_sections.core.errors import SectionParserError
from resume_sections.core.parser_config import SectionConfig, coerce_section_type, resolve_config
from resume_sections.core.projects_parser import parse_projects
from resume_sections.core.references_parser import parse_references
from resume_sections.core.schemas import SectionType
from resume_sections.core.skills_parser import parse_skills

logger = logging.getLogger(__name__)

PARSERS: Dict[SectionType, Callable[..., Any]] = {
    SectionType.DEMOGRAPHICS: parse_demographics,
    SectionType.EDUCATION: parse_education,
    SectionType.EMPLOYMENT: parse_employment,
    SectionType.PROJECTS: parse_projects,
    SectionType.SKILLS: parse_skills,
    SectionType.REFERENCES: parse_references,
}


def parse_section(
    section_type: Union[str, SectionType],
    text: Optional[str],
    config: Optional[Union[SectionConfig, Mapping[str, Any]]] = None,
) -> Any:
    """
    Parse one section of pasted resume text.

    Args:
        section_type: One of the SectionType values ("demographics", "skills", ...)
        text: Raw text copied from the resume
        config: Optional parser configuration for this call only; a config model
            or a (partial) mapping merged over the section defaults

    Returns:
        DemographicsRecord for demographics, a list of strings for skills, and a
        key -> record mapping for the other sections

    Raises:
        UnknownSectionError: section_type is not a known section
        ParserConfigError: config does not fit the section's parser
    """
    try:
        section = coerce_section_type(section_type)
        resolved = resolve_config(section, config)
    except SectionParserError as exc:
        logger.warning(f"Rejected parse request: {exc}")
        raise

    logger.debug(f"Parsing {section.value} section ({len(text or '')} chars)")
    return PARSERS[section](text or "", resolved)
