"""
Per-section parser configuration.

Each section parser is driven by an immutable configuration model built from
the pattern library. Configuration is data, not code: a caller can swap any
pattern, delimiter list or keyword list for a single call without touching the
parsers. Regex fields accept plain pattern strings and compile them on
validation; a partial mapping (e.g. only {"patterns": {"email": "..."}}) is
merged over the defaults key by key.
"""

import re
from re import Pattern
from typing import Any, Dict, Mapping, Optional, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

from resume_sections.core import patterns as library
from resume_sections.core.errors import ParserConfigError, UnknownSectionError
from resume_sections.core.schemas import SectionType


def _compiled(source: Mapping[str, str]) -> Dict[str, Pattern]:
    return {name: re.compile(regex) for name, regex in source.items()}


DEMOGRAPHICS_PATTERNS = _compiled(library.DEMOGRAPHICS_PATTERNS)
DEMOGRAPHICS_LABEL_PATTERNS = _compiled(library.DEMOGRAPHICS_LABEL_PATTERNS)
EDUCATION_PATTERNS = _compiled(library.EDUCATION_PATTERNS)
EMPLOYMENT_PATTERNS = _compiled(library.EMPLOYMENT_PATTERNS)
PROJECTS_PATTERNS = _compiled(library.PROJECTS_PATTERNS)
SKILLS_PATTERNS = _compiled(library.SKILLS_PATTERNS)
REFERENCES_PATTERNS = _compiled(library.REFERENCES_PATTERNS)


class SectionConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("patterns", "label_patterns", "keywords", mode="before", check_fields=False)
    @classmethod
    def _merge_with_defaults(cls, value: Any, info: ValidationInfo) -> Any:
        """Fill keys missing from a partial override with the default values."""
        if not isinstance(value, Mapping):
            return value
        defaults = cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return {**defaults, **value}


class DemographicsConfig(SectionConfig):
    delimiters: Tuple[str, ...] = library.DEMOGRAPHICS_DELIMITERS
    patterns: Dict[str, Pattern] = Field(default_factory=lambda: dict(DEMOGRAPHICS_PATTERNS))
    label_patterns: Dict[str, Pattern] = Field(default_factory=lambda: dict(DEMOGRAPHICS_LABEL_PATTERNS))
    keywords: Dict[str, Tuple[str, ...]] = Field(default_factory=lambda: dict(library.DEMOGRAPHICS_KEYWORDS))
    website_tlds: Tuple[str, ...] = library.WEBSITE_TLDS
    name_length: Tuple[int, int] = library.NAME_LENGTH


class EducationConfig(SectionConfig):
    delimiters: Tuple[str, ...] = library.EDUCATION_DELIMITERS
    patterns: Dict[str, Pattern] = Field(default_factory=lambda: dict(EDUCATION_PATTERNS))
    keywords: Dict[str, Tuple[str, ...]] = Field(default_factory=lambda: dict(library.EDUCATION_KEYWORDS))
    honors_window: int = library.HONORS_WINDOW


class EmploymentConfig(SectionConfig):
    patterns: Dict[str, Pattern] = Field(default_factory=lambda: dict(EMPLOYMENT_PATTERNS))


class ProjectsConfig(SectionConfig):
    patterns: Dict[str, Pattern] = Field(default_factory=lambda: dict(PROJECTS_PATTERNS))
    keywords: Dict[str, Tuple[str, ...]] = Field(default_factory=lambda: dict(library.PROJECTS_KEYWORDS))


class SkillsConfig(SectionConfig):
    delimiters: Tuple[str, ...] = library.SKILLS_DELIMITERS
    category_keywords: Tuple[str, ...] = library.SKILLS_CATEGORY_KEYWORDS
    patterns: Dict[str, Pattern] = Field(default_factory=lambda: dict(SKILLS_PATTERNS))


class ReferencesConfig(SectionConfig):
    patterns: Dict[str, Pattern] = Field(default_factory=lambda: dict(REFERENCES_PATTERNS))


CONFIG_MODELS: Dict[SectionType, Type[SectionConfig]] = {
    SectionType.DEMOGRAPHICS: DemographicsConfig,
    SectionType.EDUCATION: EducationConfig,
    SectionType.EMPLOYMENT: EmploymentConfig,
    SectionType.PROJECTS: ProjectsConfig,
    SectionType.SKILLS: SkillsConfig,
    SectionType.REFERENCES: ReferencesConfig,
}


def coerce_section_type(section_type: Union[str, SectionType]) -> SectionType:
    if isinstance(section_type, SectionType):
        return section_type
    try:
        return SectionType(section_type)
    except ValueError:
        raise UnknownSectionError(section_type) from None


def default_config(section_type: Union[str, SectionType]) -> SectionConfig:
    section = coerce_section_type(section_type)
    model = CONFIG_MODELS.get(section)
    if model is None:
        raise UnknownSectionError(section)
    return model()


def resolve_config(
    section_type: Union[str, SectionType],
    config: Optional[Union[SectionConfig, Mapping[str, Any]]] = None,
) -> SectionConfig:
    """
    Turn an optional caller-supplied configuration into the model the parser expects.

    - None: the section's default configuration
    - a model of the right class: used unchanged
    - a mapping: validated into the section's model, missing keys take defaults

    Raises ParserConfigError for a model of another section, unknown keys, or
    values of the wrong type.
    """
    section = coerce_section_type(section_type)
    model = CONFIG_MODELS.get(section)
    if model is None:
        raise UnknownSectionError(section)

    if config is None:
        return model()
    if isinstance(config, model):
        return config
    if isinstance(config, SectionConfig):
        raise ParserConfigError(
            f"{type(config).__name__} cannot configure the {section.value} parser (expected {model.__name__})"
        )
    if isinstance(config, Mapping):
        try:
            return model.model_validate(dict(config))
        except ValidationError as exc:
            raise ParserConfigError(f"Invalid {section.value} parser configuration: {exc}") from exc
    raise ParserConfigError(
        f"Parser configuration must be a mapping or {model.__name__}, got {type(config).__name__}"
    )
