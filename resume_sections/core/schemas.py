from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class SectionType(str, Enum):
    """The six resume sections a pasted block of text can belong to."""

    DEMOGRAPHICS = "demographics"
    EDUCATION = "education"
    EMPLOYMENT = "employment"
    PROJECTS = "projects"
    SKILLS = "skills"
    REFERENCES = "references"


class DemographicsRecord(BaseModel):
    """Personal/contact details. Every field is "" when nothing was extracted."""
    name: str = ""
    address: str = ""
    phone: str = ""
    email: str = ""
    linkedin: str = ""
    github: str = ""
    website: str = ""
    objective: str = ""
    available: str = ""


class EducationRecord(BaseModel):
    """One degree/school entry (one blank-line-separated block)."""
    institution: str = ""  # University, College, School name (+ location fragments)
    degree: str = ""  # B.S. Computer Science, Master of Science, etc.
    year: str = ""  # YYYY or YYYY - YYYY
    gpa: str = ""  # 3.9 or 3.95/4.0
    honors: str = ""
    concentration: str = ""  # Concentration, Minor, Focus
    coursework: str = ""


class EmploymentRecord(BaseModel):
    title: str = ""
    company: str = ""
    location: str = ""  # City, State or Remote
    dates: str = ""  # Jan 2020 - Present
    description: str = ""


class ProjectRecord(BaseModel):
    title: str = ""
    description: str = ""
    timeframe: str = ""
    technologies: str = ""


class ReferenceRecord(BaseModel):
    name: str = ""
    title: str = ""
    company: str = ""
    email: str = ""
    phone: str = ""


class ParseRequest(BaseModel):
    text: str = Field(default="", description="Raw resume text pasted by the user")
    config: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Optional parser configuration override, same shape as GET /sections/{section_type}/config",
    )


class ParseResponse(BaseModel):
    section_type: SectionType
    result: Any = Field(
        ...,
        description="Demographics record, mapping of key -> record, or list of skills",
    )
